from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from sms_sender.api.dependencies import get_dispatch_service
from sms_sender.api.schemas import SmsSendRequest, SmsSendResponse
from sms_sender.application.services.dispatch_service import SmsDispatchService
from sms_sender.domain.entities.send_request import SendRequest
from sms_sender.domain.outcome import FailureReason, SendBlocked, SendFailed, SendOutcome, SendSuccess

router = APIRouter(prefix="/api/v1/sms", tags=["SMS"])


def _status_for(outcome: SendOutcome) -> int:
    if isinstance(outcome, SendSuccess):
        return status.HTTP_200_OK
    if isinstance(outcome, SendBlocked):
        return status.HTTP_403_FORBIDDEN
    if isinstance(outcome, SendFailed) and outcome.reason is FailureReason.VALIDATION:
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_503_SERVICE_UNAVAILABLE


@router.post("/send", response_model=SmsSendResponse)
async def send_sms(
    body: SmsSendRequest,
    response: Response,
    svc: SmsDispatchService = Depends(get_dispatch_service),
) -> SmsSendResponse:
    outcome = await svc.send(
        SendRequest(destination=body.phone_number, message=body.message, user_id=body.user_id)
    )
    response.status_code = _status_for(outcome)
    return SmsSendResponse.model_validate(outcome.to_dict())
