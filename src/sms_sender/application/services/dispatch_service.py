"""
SMS Dispatch Service
validate → block-list check → synchronous publish → outcome
"""
from __future__ import annotations

import asyncio

from shared.infrastructure.observability.logger import get_logger
from sms_sender.application.services.block_list_service import BlockListService
from sms_sender.application.services.event_publisher import SmsEventPublisher
from sms_sender.domain.entities.delivery_event import DeliveryEvent
from sms_sender.domain.entities.send_request import SendRequest
from sms_sender.domain.exceptions import SmsDomainError
from sms_sender.domain.outcome import (
    FailureReason,
    SendBlocked,
    SendFailed,
    SendOutcome,
    SendSuccess,
)
from sms_sender.domain.value_objects.message_content import MessageContent
from sms_sender.domain.value_objects.phone_number import PhoneNumber

logger = get_logger(__name__)

SUCCESS_MESSAGE = "SMS sent successfully"
PUBLISH_FAILED_MESSAGE = "Failed to send SMS. Please try again later."
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred while sending SMS"


class SmsDispatchService:
    """
    Orchestrates one send request into exactly one outcome.

    Straight-line decision tree: one fork (blocked or not) and one fallible
    leaf (publish). Never raises; every failure becomes a SendFailed.
    """

    def __init__(self, block_list: BlockListService, publisher: SmsEventPublisher) -> None:
        self.block_list = block_list
        self.publisher = publisher

    async def send(self, request: SendRequest) -> SendOutcome:
        destination = request.destination if isinstance(request.destination, str) else ""

        # 1) Validate
        try:
            phone = PhoneNumber(request.destination)
            content = MessageContent(request.message)
        except SmsDomainError as e:
            logger.info(
                "Rejected invalid SMS request",
                extra={"phone_number": destination, "code": e.code, "error": e.message},
            )
            return SendFailed(destination=destination, message=e.message, reason=FailureReason.VALIDATION)

        try:
            # 2) Block list (fails open inside the guard)
            if await self.block_list.is_blocked(phone.value):
                return SendBlocked(destination=phone.value)

            # 3) Publish; the calling task is held until the broker acks or fails
            event = DeliveryEvent.create(phone.value, content.text, user_id=request.user_id)
            published = await asyncio.to_thread(self.publisher.publish_sync, event)
        except Exception as e:
            logger.error(
                "Unexpected error while dispatching SMS",
                extra={"phone_number": phone.value, "error": str(e)},
                exc_info=True,
            )
            return SendFailed(
                destination=phone.value,
                message=INTERNAL_ERROR_MESSAGE,
                reason=FailureReason.INTERNAL,
            )

        if not published:
            return SendFailed(
                destination=phone.value,
                message=PUBLISH_FAILED_MESSAGE,
                reason=FailureReason.PUBLISH,
            )

        logger.info("SMS accepted", extra={"event_id": event.event_id, "phone_number": phone.value})
        return SendSuccess(destination=phone.value, message=SUCCESS_MESSAGE)
