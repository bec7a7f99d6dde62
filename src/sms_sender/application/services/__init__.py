from sms_sender.application.services.block_list_service import DEFAULT_BLOCKED_NUMBERS, BlockListService
from sms_sender.application.services.dispatch_service import SmsDispatchService
from sms_sender.application.services.event_publisher import SmsEventPublisher

__all__ = [
    "DEFAULT_BLOCKED_NUMBERS",
    "BlockListService",
    "SmsDispatchService",
    "SmsEventPublisher",
]
