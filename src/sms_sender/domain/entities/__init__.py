from sms_sender.domain.entities.delivery_event import DeliveryEvent
from sms_sender.domain.entities.send_request import SendRequest

__all__ = ["DeliveryEvent", "SendRequest"]
