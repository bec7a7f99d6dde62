# src/sms_sender/domain/entities/delivery_event.py
"""
Delivery Event
Durable record published to the broker for one send attempt
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sms_sender.domain.value_objects.delivery_status import DeliveryStatus


def _utcnow() -> datetime:
    # naive UTC: the downstream store parses createdAt without a zone and treats it as UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class DeliveryEvent:
    """
    Immutable description of one send attempt.

    Owned by the call that creates it; handed to the publisher and not
    retained afterwards.

    Attributes:
        event_id: Globally unique identifier (UUID4 string)
        destination: Validated phone number; also the partition key
        payload: Message text
        status: Lifecycle tag (PENDING when published)
        created_at: Naive UTC timestamp
        user_id: Optional caller identifier forwarded to the store
    """

    destination: str
    payload: str
    event_id: str = field(default_factory=lambda: str(uuid4()))
    status: DeliveryStatus = DeliveryStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    user_id: str = ""

    @classmethod
    def create(cls, destination: str, payload: str, user_id: str | None = None) -> DeliveryEvent:
        """Build a fresh PENDING event with a new id and the current timestamp."""
        return cls(destination=destination, payload=payload, user_id=user_id or "")

    def to_wire(self) -> dict[str, Any]:
        """
        JSON-ready representation consumed by the SMS store.

        Returns:
            Dict with camelCase keys; createdAt is ISO-8601 without timezone
        """
        return {
            "eventId": self.event_id,
            "userId": self.user_id,
            "phoneNumber": self.destination,
            "message": self.payload,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(timespec="seconds"),
        }
