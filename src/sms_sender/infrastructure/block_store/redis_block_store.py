"""
Redis Block Store
Block list kept as a Redis SET under one key
"""
from __future__ import annotations

from redis.asyncio import Redis

from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class RedisBlockStore:
    """
    BlockStore backed by a Redis SET.

    SCARD / SISMEMBER / SADD / SREM are atomic on the server, so concurrent
    readers never observe a partially written member and concurrent add/remove
    calls converge. Errors (RedisError, connection errors) propagate to the caller.

    Attributes:
        redis: Async Redis client (decode_responses=True)
        key: Name of the SET holding blocked destinations
    """

    def __init__(self, redis: Redis, key: str) -> None:
        self.redis = redis
        self.key = key

    async def size(self) -> int:
        return int(await self.redis.scard(self.key))

    async def is_member(self, value: str) -> bool:
        return bool(await self.redis.sismember(self.key, value))

    async def add(self, *values: str) -> int:
        if not values:
            return 0
        return int(await self.redis.sadd(self.key, *values))

    async def remove(self, *values: str) -> int:
        if not values:
            return 0
        return int(await self.redis.srem(self.key, *values))

    async def ping(self) -> bool:
        return bool(await self.redis.ping())
