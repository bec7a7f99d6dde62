from fastapi import APIRouter

from sms_sender.api.routes.block_list import router as block_list_router
from sms_sender.api.routes.sms import router as sms_router

router = APIRouter()
router.include_router(sms_router)
router.include_router(block_list_router)

__all__ = ["router"]
