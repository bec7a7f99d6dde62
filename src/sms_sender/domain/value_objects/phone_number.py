# src/sms_sender/domain/value_objects/phone_number.py
"""
Phone Number Value Object
Represents an SMS destination in international format
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from sms_sender.domain.exceptions import InvalidPhoneNumberError


@dataclass(frozen=True)
class PhoneNumber:
    """
    International phone number (e.g., +15551234567).

    Format:
    - Optional leading +
    - First digit 1-9 (no leading zero)
    - 10 to 15 ASCII digits total

    Examples:
        +15551234567 (US)
        +919876543210 (India)
        15551234567 (no plus)
    """

    PATTERN = re.compile(r"^\+?[1-9][0-9]{9,14}$")

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidPhoneNumberError("Phone number is required")
        cleaned = self.value.strip()
        if not self.PATTERN.match(cleaned):
            raise InvalidPhoneNumberError(
                f"Invalid phone number format: {cleaned}. Must be 10-15 digits.",
                details={"phone_number": cleaned},
            )
        object.__setattr__(self, "value", cleaned)

    def __str__(self) -> str:
        return self.value
