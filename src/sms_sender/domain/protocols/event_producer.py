"""
Event producer protocol for domain layer.
Abstracts the broker client used to publish delivery events.
"""
from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from sms_sender.domain.entities.delivery_event import DeliveryEvent


@dataclass(frozen=True)
class AckPosition:
    """Broker-confirmed placement of a written record."""

    topic: str
    partition: int
    offset: int


@runtime_checkable
class EventProducer(Protocol):
    """Broker client interface."""

    def send(self, topic: str, key: str, value: DeliveryEvent) -> Future[AckPosition]:
        """
        Hand an event to the broker client.

        Never raises: every failure, including ones detected before the
        record leaves the process, is delivered through the returned future.
        """
        ...

    def close(self, timeout: float = 10.0) -> None:
        """Flush outstanding records and release client resources."""
        ...
