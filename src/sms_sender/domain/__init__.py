from sms_sender.domain.entities import DeliveryEvent, SendRequest
from sms_sender.domain.outcome import (
    BLOCKED_MESSAGE,
    FailureReason,
    OutcomeStatus,
    SendBlocked,
    SendFailed,
    SendOutcome,
    SendSuccess,
)

__all__ = [
    "BLOCKED_MESSAGE",
    "DeliveryEvent",
    "FailureReason",
    "OutcomeStatus",
    "SendBlocked",
    "SendFailed",
    "SendOutcome",
    "SendRequest",
    "SendSuccess",
]
