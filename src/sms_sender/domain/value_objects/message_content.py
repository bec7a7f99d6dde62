# src/sms_sender/domain/value_objects/message_content.py
"""
Message Content Value Object
"""
from __future__ import annotations

from dataclasses import dataclass

from sms_sender.domain.exceptions import InvalidMessageContentError

MAX_SMS_LENGTH = 160


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(text.encode("utf-16-le")) // 2


@dataclass(frozen=True)
class MessageContent:
    """Single-segment SMS text: non-blank, at most 160 UTF-16 code units."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip():
            raise InvalidMessageContentError("Message is required")
        length = utf16_length(self.text)
        if length > MAX_SMS_LENGTH:
            raise InvalidMessageContentError(
                f"Message must be between 1 and {MAX_SMS_LENGTH} characters",
                details={"length": length},
            )

    def __len__(self) -> int:
        return utf16_length(self.text)

    def __str__(self) -> str:
        return self.text
