"""In-memory implementation of IQuotaStore for testing and development."""

import asyncio
from dataclasses import replace
from typing import Dict, Optional

import structlog

from aunouri.domain.access_tier.core.ports.quota_store import IQuotaStore
from aunouri.domain.access_tier.core.value_objects.meal_logging_quota import (
    MealLoggingQuota,
)

logger = structlog.get_logger(__name__)


class InMemoryQuotaStore(IQuotaStore):
    """
    In-memory implementation of the quota store.

    Uses a dictionary keyed by user ID. Writes are serialized with an
    ``asyncio.Lock`` so a compare-and-set is atomic within the event loop.
    Data is lost when the process stops.
    """

    def __init__(self) -> None:
        """Initialize empty store."""
        self._quotas: Dict[str, MealLoggingQuota] = {}
        self._lock = asyncio.Lock()

    async def get(self, user_id: str) -> Optional[MealLoggingQuota]:
        """
        Load stored quota.

        Args:
            user_id: User identifier

        Returns:
            Stored quota if present, None otherwise
        """
        return self._quotas.get(user_id)

    async def save(self, user_id: str, quota: MealLoggingQuota) -> MealLoggingQuota:
        """
        Store quota unconditionally.

        Args:
            user_id: User identifier
            quota: Quota values to store

        Returns:
            Stored quota with bumped version
        """
        async with self._lock:
            current = self._quotas.get(user_id)
            stored = replace(quota, version=(current.version if current else 0) + 1)
            self._quotas[user_id] = stored
            return stored

    async def compare_and_set(
        self,
        user_id: str,
        quota: MealLoggingQuota,
        expected_version: Optional[int],
    ) -> Optional[MealLoggingQuota]:
        """
        Store quota if the stored version matches ``expected_version``.

        Args:
            user_id: User identifier
            quota: Quota values to store
            expected_version: Version read by the caller, None if absent

        Returns:
            Stored quota, or None on version mismatch
        """
        async with self._lock:
            current = self._quotas.get(user_id)
            current_version = current.version if current is not None else None
            if current_version != expected_version:
                logger.debug(
                    "Quota version mismatch",
                    user_id=user_id,
                    expected=expected_version,
                    actual=current_version,
                )
                return None

            stored = replace(quota, version=(expected_version or 0) + 1)
            self._quotas[user_id] = stored
            return stored

    async def delete(self, user_id: str) -> None:
        """
        Delete stored quota.

        Args:
            user_id: User identifier
        """
        async with self._lock:
            self._quotas.pop(user_id, None)

    def clear(self) -> None:
        """
        Clear all quotas from memory.

        Useful for test cleanup.
        """
        self._quotas.clear()

    def count(self) -> int:
        """
        Get number of stored quotas.

        Returns:
            Number of users with a stored quota
        """
        return len(self._quotas)
