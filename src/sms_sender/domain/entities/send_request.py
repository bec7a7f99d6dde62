# src/sms_sender/domain/entities/send_request.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SendRequest:
    """Caller-supplied send input. Validated and discarded per call."""

    destination: str
    message: str
    user_id: Optional[str] = None
