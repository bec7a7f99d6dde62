from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from sms_sender.api.dependencies import get_block_list_service
from sms_sender.api.schemas import (
    PHONE_NUMBER_PATTERN,
    BlockListAddResponse,
    BlockListCheckResponse,
    BlockListEntryRequest,
    BlockListRemoveResponse,
    BlockListSizeResponse,
)
from sms_sender.application.services.block_list_service import BlockListService

router = APIRouter(prefix="/api/v1/sms/blocklist", tags=["SMS: Block List"])


@router.get("/size", response_model=BlockListSizeResponse)
async def block_list_size(svc: BlockListService = Depends(get_block_list_service)) -> BlockListSizeResponse:
    return BlockListSizeResponse(size=await svc.size())


@router.post("", response_model=BlockListAddResponse, status_code=status.HTTP_200_OK)
async def add_to_block_list(
    body: BlockListEntryRequest,
    svc: BlockListService = Depends(get_block_list_service),
) -> BlockListAddResponse:
    added = await svc.add(body.phone_number)
    return BlockListAddResponse(phone_number=body.phone_number, added=added)


@router.get("/{phone_number}", response_model=BlockListCheckResponse)
async def check_block_list(
    phone_number: str = Path(..., pattern=PHONE_NUMBER_PATTERN),
    svc: BlockListService = Depends(get_block_list_service),
) -> BlockListCheckResponse:
    return BlockListCheckResponse(phone_number=phone_number, blocked=await svc.is_blocked(phone_number))


@router.delete("/{phone_number}", response_model=BlockListRemoveResponse)
async def remove_from_block_list(
    phone_number: str = Path(..., pattern=PHONE_NUMBER_PATTERN),
    svc: BlockListService = Depends(get_block_list_service),
) -> BlockListRemoveResponse:
    removed = await svc.remove(phone_number)
    return BlockListRemoveResponse(phone_number=phone_number, removed=removed)
