"""
In-memory Block Store
Process-local set for tests and BLOCKLIST_BACKEND=memory local runs. **Not for production**:
it is not shared between processes.
"""
from __future__ import annotations

import asyncio
from typing import Iterable


class InMemoryBlockStore:
    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._members: set[str] = set(initial)
        self._lock = asyncio.Lock()

    async def size(self) -> int:
        async with self._lock:
            return len(self._members)

    async def is_member(self, value: str) -> bool:
        async with self._lock:
            return value in self._members

    async def add(self, *values: str) -> int:
        async with self._lock:
            new = set(values) - self._members
            self._members.update(new)
            return len(new)

    async def remove(self, *values: str) -> int:
        async with self._lock:
            present = set(values) & self._members
            self._members.difference_update(present)
            return len(present)

    async def ping(self) -> bool:
        return True

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._members)
