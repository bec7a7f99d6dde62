"""
SMS Event Publisher
Synchronous publish-with-confirmation of delivery events
"""
from __future__ import annotations

from concurrent.futures import TimeoutError as FutureTimeoutError

from shared.infrastructure.observability.logger import get_logger
from sms_sender.domain.entities.delivery_event import DeliveryEvent
from sms_sender.domain.protocols.event_producer import EventProducer

logger = get_logger(__name__)


class SmsEventPublisher:
    """
    Publishes delivery events and waits for the broker's acknowledgment.

    Success is reported only once the broker has confirmed the write, so a
    successful API response always means the event is durably queued. The
    calling thread is blocked for the whole round trip.

    One attempt per call: no retries.

    Attributes:
        producer: Broker client
        topic: Destination topic name
        send_timeout: Seconds to wait for the ack before giving up
    """

    def __init__(self, producer: EventProducer, topic: str, send_timeout: float = 35.0) -> None:
        self.producer = producer
        self.topic = topic
        self.send_timeout = send_timeout

    def publish_sync(self, event: DeliveryEvent) -> bool:
        """
        Send an event keyed by its destination and block until acknowledged.

        Keying by destination keeps every event for one phone number in one
        partition, in order.

        Args:
            event: Delivery event to publish

        Returns:
            True after acknowledgment; False on timeout, serialization error or broker rejection
        """
        logger.debug(
            "Sending SMS event (sync)",
            extra={"topic": self.topic, "event_id": event.event_id, "phone_number": event.destination},
        )
        try:
            future = self.producer.send(self.topic, event.destination, event)
            ack = future.result(timeout=self.send_timeout)
        except FutureTimeoutError:
            logger.error(
                "Timed out waiting for SMS event acknowledgment",
                extra={
                    "event_id": event.event_id,
                    "phone_number": event.destination,
                    "timeout_seconds": self.send_timeout,
                },
            )
            return False
        except Exception as e:
            logger.error(
                "Failed to send SMS event (sync)",
                extra={"event_id": event.event_id, "phone_number": event.destination, "error": str(e)},
                exc_info=True,
            )
            return False

        logger.info(
            "SMS event sent (sync)",
            extra={
                "event_id": event.event_id,
                "topic": ack.topic,
                "partition": ack.partition,
                "offset": ack.offset,
            },
        )
        return True
