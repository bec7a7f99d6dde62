from __future__ import annotations

from concurrent.futures import Future
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError

from shared.config import Settings
from sms_sender.application.services.block_list_service import BlockListService
from sms_sender.application.services.dispatch_service import SmsDispatchService
from sms_sender.application.services.event_publisher import SmsEventPublisher
from sms_sender.domain.entities.delivery_event import DeliveryEvent
from sms_sender.domain.exceptions import KafkaDeliveryError
from sms_sender.domain.protocols.event_producer import AckPosition
from sms_sender.infrastructure.block_store import InMemoryBlockStore
from sms_sender.main import create_app

TOPIC = "sms.events"


class FakeProducer:
    """
    EventProducer double.

    mode: "ack" resolves with an ack position, "fail" with a delivery error,
    "hang" never resolves (the publisher's wait times out).
    """

    def __init__(self, mode: str = "ack") -> None:
        self.mode = mode
        self.sent: list[tuple[str, str, DeliveryEvent]] = []
        self.closed = False
        self.reachable = True

    def send(self, topic: str, key: str, value: DeliveryEvent) -> Future:
        self.sent.append((topic, key, value))
        future: Future = Future()
        if self.mode == "ack":
            future.set_result(AckPosition(topic=topic, partition=0, offset=len(self.sent) - 1))
        elif self.mode == "fail":
            future.set_exception(KafkaDeliveryError("Delivery failed: _MSG_TIMED_OUT"))
        return future

    def ping(self, timeout: float = 2.0) -> bool:
        return self.reachable

    def close(self, timeout: float = 10.0) -> None:
        self.closed = True


class FailingBlockStore:
    """BlockStore whose backend is always down."""

    def __init__(self) -> None:
        self.calls = 0

    async def _fail(self, *args):
        self.calls += 1
        raise RedisConnectionError("Connection refused")

    size = is_member = add = remove = ping = _fail


class CountingPublisher(SmsEventPublisher):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.calls: list[DeliveryEvent] = []

    def publish_sync(self, event: DeliveryEvent) -> bool:
        self.calls.append(event)
        return super().publish_sync(event)


@pytest.fixture
def settings() -> Settings:
    return Settings(blocklist_backend="memory", json_logs=False, log_level="DEBUG")


@pytest.fixture
def producer() -> FakeProducer:
    return FakeProducer()


@pytest.fixture
def make_producer() -> Callable[[str], FakeProducer]:
    return FakeProducer


@pytest.fixture
def store() -> InMemoryBlockStore:
    return InMemoryBlockStore()


@pytest.fixture
def failing_store() -> FailingBlockStore:
    return FailingBlockStore()


@pytest.fixture
def block_list(store: InMemoryBlockStore) -> BlockListService:
    return BlockListService(store)


@pytest.fixture
def make_dispatcher() -> Callable[..., tuple[SmsDispatchService, CountingPublisher]]:
    def _make(block_store, producer, send_timeout: float = 1.0):
        publisher = CountingPublisher(producer, topic=TOPIC, send_timeout=send_timeout)
        return SmsDispatchService(BlockListService(block_store), publisher), publisher

    return _make


@pytest.fixture
def client(settings: Settings, store: InMemoryBlockStore, producer: FakeProducer) -> Iterator[TestClient]:
    app = create_app(settings, block_store=store, event_producer=producer)
    with TestClient(app) as c:
        yield c
