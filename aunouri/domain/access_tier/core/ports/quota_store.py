"""IQuotaStore port - persisted meal logging counters."""

from abc import ABC, abstractmethod
from typing import Optional

from ..value_objects.meal_logging_quota import MealLoggingQuota


class IQuotaStore(ABC):
    """Port for per-user meal logging quota persistence.

    Implementations must raise ``StorageUnavailableError`` when the
    backing store cannot be reached, never return a default instead.
    """

    @abstractmethod
    async def get(self, user_id: str) -> Optional[MealLoggingQuota]:
        """Load the stored quota.

        Args:
            user_id: User identifier

        Returns:
            Optional[MealLoggingQuota]: Stored quota with its version,
                None if nothing is stored yet
        """
        pass

    @abstractmethod
    async def save(self, user_id: str, quota: MealLoggingQuota) -> MealLoggingQuota:
        """Unconditionally store a quota (last write wins).

        Returns:
            MealLoggingQuota: Stored quota with its new version
        """
        pass

    @abstractmethod
    async def compare_and_set(
        self,
        user_id: str,
        quota: MealLoggingQuota,
        expected_version: Optional[int],
    ) -> Optional[MealLoggingQuota]:
        """Store ``quota`` only if the stored version is still ``expected_version``.

        Args:
            user_id: User identifier
            quota: New quota values (its own ``version`` is ignored)
            expected_version: Version read before computing ``quota``;
                None means no document may exist yet

        Returns:
            Optional[MealLoggingQuota]: Stored quota with version
                ``expected_version + 1`` (1 for a new document), or None
                if the precondition failed
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Remove the stored quota (account deletion, tests)."""
        pass
