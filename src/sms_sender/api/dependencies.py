"""
FastAPI dependency providers.
Services are built once in the app lifespan and stored on app.state.
"""
from __future__ import annotations

from fastapi import Request

from sms_sender.application.services.block_list_service import BlockListService
from sms_sender.application.services.dispatch_service import SmsDispatchService


def get_block_list_service(request: Request) -> BlockListService:
    return request.app.state.block_list_service


def get_dispatch_service(request: Request) -> SmsDispatchService:
    return request.app.state.dispatch_service
