"""
Block store adapters
"""
from sms_sender.infrastructure.block_store.in_memory_block_store import InMemoryBlockStore
from sms_sender.infrastructure.block_store.redis_block_store import RedisBlockStore

__all__ = [
    "InMemoryBlockStore",
    "RedisBlockStore",
]
