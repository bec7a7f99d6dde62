import pytest

from sms_sender.domain.entities.send_request import SendRequest
from sms_sender.domain.outcome import (
    BLOCKED_MESSAGE,
    FailureReason,
    OutcomeStatus,
    SendBlocked,
    SendFailed,
    SendSuccess,
)
from sms_sender.domain.value_objects.delivery_status import DeliveryStatus
from sms_sender.infrastructure.block_store import InMemoryBlockStore


@pytest.mark.asyncio
async def test_blocked_destination_short_circuits(make_dispatcher, producer):
    svc, publisher = make_dispatcher(InMemoryBlockStore(["+1111111111"]), producer)

    outcome = await svc.send(SendRequest(destination="+1111111111", message="hi"))

    assert isinstance(outcome, SendBlocked)
    assert outcome.to_dict()["status"] == "BLOCKED"
    assert outcome.to_dict()["phoneNumber"] == "+1111111111"
    assert outcome.message == BLOCKED_MESSAGE
    assert publisher.calls == []
    assert producer.sent == []


@pytest.mark.asyncio
async def test_acknowledged_publish_is_success(make_dispatcher, producer, store):
    svc, publisher = make_dispatcher(store, producer)

    outcome = await svc.send(SendRequest(destination="+15551234567", message="hello"))

    assert isinstance(outcome, SendSuccess)
    assert outcome.status is OutcomeStatus.SUCCESS
    assert outcome.destination == "+15551234567"
    assert len(publisher.calls) == 1
    event = publisher.calls[0]
    assert event.destination == "+15551234567"
    assert event.payload == "hello"
    assert event.status is DeliveryStatus.PENDING


@pytest.mark.asyncio
async def test_broker_timeout_is_failed(make_dispatcher, make_producer, store):
    svc, _ = make_dispatcher(store, make_producer("hang"), send_timeout=0.05)

    outcome = await svc.send(SendRequest(destination="+15551234567", message="hello"))

    assert isinstance(outcome, SendFailed)
    assert outcome.to_dict()["status"] == "FAILED"
    assert outcome.destination == "+15551234567"
    assert outcome.reason is FailureReason.PUBLISH


@pytest.mark.asyncio
async def test_broker_error_is_failed(make_dispatcher, make_producer, store):
    svc, _ = make_dispatcher(store, make_producer("fail"))

    outcome = await svc.send(SendRequest(destination="+15551234567", message="hello"))

    assert isinstance(outcome, SendFailed)
    assert outcome.reason is FailureReason.PUBLISH


@pytest.mark.asyncio
async def test_block_store_down_still_sends(make_dispatcher, producer, failing_store):
    svc, publisher = make_dispatcher(failing_store, producer)

    outcome = await svc.send(SendRequest(destination="+1111111111", message="hi"))

    assert isinstance(outcome, SendSuccess)
    assert len(publisher.calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "destination,message",
    [
        ("", "hi"),
        ("12345", "hi"),
        ("+0123456789", "hi"),
        ("+1234567890123456", "hi"),
        ("+15551234567", ""),
        ("+15551234567", "   "),
        ("+15551234567", "x" * 161),
        (None, "hi"),
    ],
)
async def test_invalid_input_is_failed_without_lookup(make_dispatcher, producer, failing_store, destination, message):
    svc, publisher = make_dispatcher(failing_store, producer)

    outcome = await svc.send(SendRequest(destination=destination, message=message))

    assert isinstance(outcome, SendFailed)
    assert outcome.reason is FailureReason.VALIDATION
    assert failing_store.calls == 0
    assert publisher.calls == []


@pytest.mark.asyncio
async def test_message_at_limit_is_accepted(make_dispatcher, producer, store):
    svc, _ = make_dispatcher(store, producer)
    outcome = await svc.send(SendRequest(destination="15551234567", message="x" * 160))
    assert isinstance(outcome, SendSuccess)


@pytest.mark.asyncio
async def test_user_id_is_forwarded(make_dispatcher, producer, store):
    svc, publisher = make_dispatcher(store, producer)
    await svc.send(SendRequest(destination="+15551234567", message="hello", user_id="user-42"))
    assert publisher.calls[0].user_id == "user-42"


@pytest.mark.asyncio
async def test_unexpected_error_is_contained(make_dispatcher, producer, store):
    svc, publisher = make_dispatcher(store, producer)

    def explode(event):
        raise RuntimeError("worker thread died")

    publisher.publish_sync = explode

    outcome = await svc.send(SendRequest(destination="+15551234567", message="hello"))

    assert isinstance(outcome, SendFailed)
    assert outcome.reason is FailureReason.INTERNAL


@pytest.mark.asyncio
@pytest.mark.parametrize("destination", ["+1١١١١١١١١١", "+1٥٥٥١٢٣٤٥٦٧"])
async def test_non_ascii_digits_are_rejected_before_block_check(make_dispatcher, producer, destination):
    svc, publisher = make_dispatcher(InMemoryBlockStore(["+1111111111"]), producer)

    outcome = await svc.send(SendRequest(destination=destination, message="hi"))

    assert isinstance(outcome, SendFailed)
    assert outcome.reason is FailureReason.VALIDATION
    assert publisher.calls == []
    assert producer.sent == []


@pytest.mark.asyncio
async def test_message_over_limit_in_utf16_units_is_failed(make_dispatcher, producer, store):
    svc, publisher = make_dispatcher(store, producer)

    outcome = await svc.send(SendRequest(destination="+15551234567", message="\U0001F600" * 100))

    assert isinstance(outcome, SendFailed)
    assert outcome.reason is FailureReason.VALIDATION
    assert publisher.calls == []
