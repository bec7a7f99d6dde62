# src/sms_sender/domain/outcome.py
"""
Send Outcome
Closed set of terminal results of the send pipeline
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Union

BLOCKED_MESSAGE = "Phone number is in the block list"


def _now() -> datetime:
    return datetime.now()


class OutcomeStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    BLOCKED = "BLOCKED"


class FailureReason(str, Enum):
    """Why a send FAILED; lets the HTTP layer choose a status code."""
    VALIDATION = "validation"
    PUBLISH = "publish"
    INTERNAL = "internal"


@dataclass(frozen=True)
class _BaseOutcome:
    status: ClassVar[OutcomeStatus]

    destination: str
    message: str
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "message": self.message,
            "phoneNumber": self.destination,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class SendSuccess(_BaseOutcome):
    """Event durably queued (broker acknowledged)."""
    status: ClassVar[OutcomeStatus] = OutcomeStatus.SUCCESS

    timestamp: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class SendFailed(_BaseOutcome):
    """Invalid input, or the publish was not acknowledged."""
    status: ClassVar[OutcomeStatus] = OutcomeStatus.FAILED

    timestamp: datetime = field(default_factory=_now)
    reason: FailureReason = FailureReason.PUBLISH


@dataclass(frozen=True)
class SendBlocked(_BaseOutcome):
    """Destination is on the block list; nothing was published."""
    status: ClassVar[OutcomeStatus] = OutcomeStatus.BLOCKED

    message: str = BLOCKED_MESSAGE
    timestamp: datetime = field(default_factory=_now)


SendOutcome = Union[SendSuccess, SendFailed, SendBlocked]
