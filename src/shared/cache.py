"""
Async Redis connector.

Policy alignment:
- Redis holds the SMS block list set; it is the single source of truth for blocking.
- No local caching layer sits in front of it.
- Keys: sms:blocklist (configurable via APP_REDIS_BLOCKLIST_KEY).
"""

from __future__ import annotations

import asyncio
from typing import Optional

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

from shared.config import Settings, get_settings
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

# -----------------------------
# Lazy singleton pool + client
# -----------------------------
_pool: Optional[ConnectionPool] = None
_client: Optional[Redis] = None
_lock = asyncio.Lock()


async def get_redis(settings: Optional[Settings] = None) -> Redis:
    """Lazily create a global async Redis client (safe under concurrent first use)."""
    global _pool, _client
    if _client is not None:
        return _client

    async with _lock:
        if _client is not None:
            return _client

        settings = settings or get_settings()
        _pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=settings.redis_max_connections,
            socket_timeout=settings.redis_socket_timeout,
            socket_connect_timeout=settings.redis_socket_timeout,
            decode_responses=True,
        )
        _client = Redis(connection_pool=_pool)
        # quick health check; a down Redis must not stop the process from booting
        try:
            await _client.ping()
        except (RedisError, OSError) as e:
            logger.warning("Redis not reachable at startup", extra={"error": str(e)})

        return _client


async def close_redis() -> None:
    """
    Gracefully close the global client/pool (shutdown and test teardown).
    """
    global _client, _pool
    if _client is not None:
        try:
            await _client.aclose()
        except RedisError as e:
            logger.warning("Redis client close failed", extra={"error": str(e)})
    if _pool is not None:
        try:
            await _pool.disconnect()
        except RedisError as e:
            logger.warning("Redis pool disconnect failed", extra={"error": str(e)})
    _client = None
    _pool = None
