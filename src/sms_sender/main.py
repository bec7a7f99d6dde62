from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from shared.api.middleware import CorrelationIdMiddleware
from shared.cache import close_redis, get_redis
from shared.config import Settings, get_settings
from shared.exceptions import register_exception_handlers
from shared.health import router as health_router
from shared.infrastructure.observability.logger import configure_logging, get_logger
from sms_sender.api.routes import router as sms_router
from sms_sender.application.services.block_list_service import BlockListService
from sms_sender.application.services.dispatch_service import SmsDispatchService
from sms_sender.application.services.event_publisher import SmsEventPublisher
from sms_sender.domain.protocols.block_store import BlockStore
from sms_sender.domain.protocols.event_producer import EventProducer
from sms_sender.infrastructure.block_store import InMemoryBlockStore, RedisBlockStore
from sms_sender.infrastructure.kafka import KafkaEventProducer

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    block_store: Optional[BlockStore] = None,
    event_producer: Optional[EventProducer] = None,
) -> FastAPI:
    """
    Build the SMS Sender API.

    Backing services are created in the lifespan unless injected (tests pass
    an in-memory block store and a fake producer).
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, json_logs=settings.json_logs, environment=settings.environment)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_redis = False
        store = block_store
        if store is None:
            if settings.blocklist_backend == "memory":
                store = InMemoryBlockStore()
            else:
                store = RedisBlockStore(await get_redis(settings), settings.blocklist_key)
                owns_redis = True

        producer = event_producer or KafkaEventProducer(settings.kafka_producer_config())

        block_list = BlockListService(store)
        publisher = SmsEventPublisher(
            producer,
            topic=settings.kafka_topic,
            send_timeout=settings.kafka_send_timeout_seconds,
        )

        app.state.settings = settings
        app.state.block_store = store
        app.state.event_producer = producer
        app.state.block_list_service = block_list
        app.state.dispatch_service = SmsDispatchService(block_list, publisher)

        # never raises; an unreachable store only leaves the list unseeded
        await block_list.initialize()
        logger.info("SMS Sender started", extra={"settings": settings.safe_dict()})

        try:
            yield
        finally:
            producer.close()
            if owns_redis:
                await close_redis()
            logger.info("SMS Sender stopped")

    app = FastAPI(
        title="SMS Sender API",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(sms_router)
    app.include_router(health_router)

    # Centralized error handling → {code, message, details?, correlation_id?}
    register_exception_handlers(app)

    @app.get("/", tags=["Root"])
    async def root():
        return {
            "message": "SMS Sender API",
            "docs": "/docs",
            "health": ["/_health/redis", "/_health/kafka"],
        }

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "sms_sender.main:create_app",
        factory=True,
        host=settings.server_host,
        port=settings.server_port,
        reload=False,
    )
