"""Kafka Producer – broker client adapter for delivery events.

Wraps confluent_kafka.Producer behind the EventProducer protocol: every send
returns a Future that a delivery report resolves with the ack position.
"""
from __future__ import annotations

import json
import logging
import threading
from concurrent.futures import Future
from typing import Any, Mapping, Optional

from confluent_kafka import KafkaError, KafkaException, Message, Producer

from shared.infrastructure.observability.logger import get_logger
from sms_sender.domain.entities.delivery_event import DeliveryEvent
from sms_sender.domain.exceptions import KafkaDeliveryError
from sms_sender.domain.protocols.event_producer import AckPosition

logger = get_logger(__name__)


def serialize_event(event: DeliveryEvent) -> bytes:
    """UTF-8 JSON body of a delivery event."""
    return json.dumps(event.to_wire(), separators=(",", ":")).encode("utf-8")


class KafkaEventProducer:
    """
    Thread-safe delivery-event producer.

    librdkafka only runs delivery callbacks from poll()/flush(), so a daemon
    thread polls continuously; callers block on the returned future, not on poll.
    """

    def __init__(
        self,
        config: Mapping[str, Any],
        *,
        producer: Optional[Producer] = None,
        poll_interval: float = 0.1,
    ) -> None:
        if producer is None:
            conf = dict(config)
            conf.setdefault("logger", logging.getLogger("confluent_kafka"))
            producer = Producer(conf)
        self._producer = producer
        self._poll_interval = poll_interval
        self._stop = threading.Event()
        self._poller = threading.Thread(target=self._poll_loop, name="kafka-delivery-poller", daemon=True)
        self._poller.start()

    def _poll_loop(self) -> None:
        while not self._stop.is_set():
            self._producer.poll(self._poll_interval)

    def send(self, topic: str, key: str, value: DeliveryEvent) -> Future[AckPosition]:
        future: Future[AckPosition] = Future()

        def on_delivery(err: Optional[KafkaError], msg: Message) -> None:
            if err is not None:
                future.set_exception(KafkaDeliveryError(
                    f"Delivery failed: {err}",
                    details={"topic": topic, "key": key, "kafka_error": str(err)},
                ))
                return
            future.set_result(AckPosition(topic=msg.topic(), partition=msg.partition(), offset=msg.offset()))

        try:
            payload = serialize_event(value)
            self._producer.produce(
                topic=topic,
                key=key.encode("utf-8"),
                value=payload,
                on_delivery=on_delivery,
            )
        except (BufferError, KafkaException, TypeError, ValueError) as e:
            # local queue full, unknown topic, serialization failure: nothing was sent
            if not future.done():
                future.set_exception(e)
        return future

    def ping(self, timeout: float = 2.0) -> bool:
        """True if cluster metadata can be fetched."""
        try:
            self._producer.list_topics(timeout=timeout)
            return True
        except KafkaException as e:
            logger.warning("Kafka metadata request failed", extra={"error": str(e)})
            return False

    def close(self, timeout: float = 10.0) -> None:
        """Stop the poller and flush whatever is still queued."""
        self._stop.set()
        self._poller.join(timeout=timeout)
        remaining = self._producer.flush(timeout)
        if remaining:
            logger.warning("Kafka producer closed with undelivered records", extra={"remaining": remaining})
        else:
            logger.info("Kafka producer closed")
