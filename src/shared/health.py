import asyncio

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


def _unavailable(service: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"service": service, "status": "unavailable"},
    )


@router.get("/_health/redis")
async def health_redis(request: Request):
    try:
        pong = await request.app.state.block_store.ping()
        return {"service": "redis", "status": "ok" if pong else "degraded"}
    except Exception as e:
        logger.warning("Redis health check failed", extra={"error": str(e)})
        return _unavailable("redis")


@router.get("/_health/kafka")
async def health_kafka(request: Request):
    # metadata fetch blocks; keep it off the event loop
    ok = await asyncio.to_thread(request.app.state.event_producer.ping)
    if not ok:
        return _unavailable("kafka")
    return {"service": "kafka", "status": "ok"}
