from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from sms_sender.domain.value_objects.message_content import MAX_SMS_LENGTH

PHONE_NUMBER_PATTERN = r"^\+?[1-9][0-9]{9,14}$"


class SmsSendRequest(BaseModel):
    phone_number: str = Field(..., alias="phoneNumber", pattern=PHONE_NUMBER_PATTERN)
    message: str = Field(..., min_length=1, max_length=MAX_SMS_LENGTH)
    user_id: Optional[str] = Field(None, alias="userId", max_length=128)

    model_config = ConfigDict(populate_by_name=True)


class SmsSendResponse(BaseModel):
    status: str
    message: str
    phone_number: str = Field(..., alias="phoneNumber")
    timestamp: datetime

    model_config = ConfigDict(populate_by_name=True)


class BlockListEntryRequest(BaseModel):
    phone_number: str = Field(..., alias="phoneNumber", pattern=PHONE_NUMBER_PATTERN)

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class BlockListSizeResponse(BaseModel):
    size: int


class BlockListAddResponse(BaseModel):
    phone_number: str = Field(..., alias="phoneNumber")
    added: bool

    model_config = ConfigDict(populate_by_name=True)


class BlockListRemoveResponse(BaseModel):
    phone_number: str = Field(..., alias="phoneNumber")
    removed: bool

    model_config = ConfigDict(populate_by_name=True)


class BlockListCheckResponse(BaseModel):
    phone_number: str = Field(..., alias="phoneNumber")
    blocked: bool

    model_config = ConfigDict(populate_by_name=True)
