from sms_sender.domain.value_objects.delivery_status import DeliveryStatus
from sms_sender.domain.value_objects.message_content import MAX_SMS_LENGTH, MessageContent
from sms_sender.domain.value_objects.phone_number import PhoneNumber

__all__ = [
    "DeliveryStatus",
    "MAX_SMS_LENGTH",
    "MessageContent",
    "PhoneNumber",
]
