"""
Block store protocol for domain layer.
Abstracts the shared destination set without coupling to Redis.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlockStore(Protocol):
    """
    Set abstraction over a single named key.

    Implementations must be safe for concurrent use by many callers and
    may raise on backend failure; recovery policy belongs to the caller.
    """

    async def size(self) -> int:
        """Number of members in the set."""
        ...

    async def is_member(self, value: str) -> bool:
        """True if value is in the set."""
        ...

    async def add(self, *values: str) -> int:
        """
        Add values to the set.

        Returns:
            Number of values that were not already present
        """
        ...

    async def remove(self, *values: str) -> int:
        """
        Remove values from the set.

        Returns:
            Number of values that were present and removed
        """
        ...
