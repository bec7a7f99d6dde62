"""
Block List Service
Decides whether a destination is disallowed and administers the block list
"""
from __future__ import annotations

from typing import Sequence

from shared.infrastructure.observability.logger import get_logger
from sms_sender.domain.protocols.block_store import BlockStore

logger = get_logger(__name__)

# Seeded into an empty block list at startup.
DEFAULT_BLOCKED_NUMBERS: tuple[str, ...] = (
    "+1111111111",
    "+2222222222",
    "+3333333333",
    "+9999999999",
    "+5555555555",
)


class BlockListService:
    """
    Guard in front of the send pipeline.

    The store is the single source of truth: nothing is cached locally.
    Every public method returns a value and never raises; store failures are
    logged and replaced by a default.

    FAIL-OPEN: when the store cannot answer, is_blocked() returns False and the
    message is sent. Availability is preferred over enforcing the list during a
    store outage. This is intentional; switching to fail-closed is a product
    decision, not a bug fix.
    """

    def __init__(
        self,
        store: BlockStore,
        *,
        baseline: Sequence[str] = DEFAULT_BLOCKED_NUMBERS,
    ) -> None:
        self.store = store
        self.baseline = tuple(baseline)

    async def initialize(self) -> None:
        """
        Seed the baseline list if the block list is empty.

        Idempotent: a non-empty list is left untouched. Failures are logged and
        swallowed so process startup never depends on the store being reachable.
        """
        try:
            logger.info("Initializing block list")
            existing = await self.store.size()
            if existing > 0:
                logger.info(
                    "Block list already populated, skipping initialization",
                    extra={"size": existing},
                )
                return

            added = await self.store.add(*self.baseline)
            logger.info(
                "Block list initialized",
                extra={"added": added, "phone_numbers": list(self.baseline)},
            )
        except Exception as e:
            logger.error(
                "Failed to initialize block list",
                extra={"error": str(e)},
                exc_info=True,
            )

    async def is_blocked(self, phone_number: str) -> bool:
        """
        Check whether a destination is on the block list.

        Returns:
            True if blocked; False if not blocked OR the store failed (fail-open)
        """
        try:
            blocked = await self.store.is_member(phone_number)
        except Exception as e:
            logger.error(
                "Block list lookup failed, treating destination as not blocked",
                extra={"phone_number": phone_number, "error": str(e), "fail_open": True},
                exc_info=True,
            )
            return False

        if blocked:
            logger.warning("Phone number is in the block list", extra={"phone_number": phone_number})
        else:
            logger.debug("Phone number is not blocked", extra={"phone_number": phone_number})
        return blocked

    async def add(self, phone_number: str) -> bool:
        """
        Add a destination to the block list.

        Returns:
            True if newly added; False if already present or on failure
        """
        try:
            added = await self.store.add(phone_number) > 0
        except Exception as e:
            logger.error(
                "Failed to add phone number to block list",
                extra={"phone_number": phone_number, "error": str(e)},
                exc_info=True,
            )
            return False

        if added:
            logger.info("Added phone number to block list", extra={"phone_number": phone_number})
        else:
            logger.info("Phone number was already in block list", extra={"phone_number": phone_number})
        return added

    async def remove(self, phone_number: str) -> bool:
        """
        Remove a destination from the block list.

        Returns:
            True if it was present and removed; False otherwise or on failure
        """
        try:
            removed = await self.store.remove(phone_number) > 0
        except Exception as e:
            logger.error(
                "Failed to remove phone number from block list",
                extra={"phone_number": phone_number, "error": str(e)},
                exc_info=True,
            )
            return False

        if removed:
            logger.info("Removed phone number from block list", extra={"phone_number": phone_number})
        else:
            logger.info("Phone number was not in block list", extra={"phone_number": phone_number})
        return removed

    async def size(self) -> int:
        """Current number of blocked destinations; 0 on failure."""
        try:
            return await self.store.size()
        except Exception as e:
            logger.error("Failed to get block list size", extra={"error": str(e)}, exc_info=True)
            return 0
