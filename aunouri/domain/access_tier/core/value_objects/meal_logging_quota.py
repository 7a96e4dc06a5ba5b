"""MealLoggingQuota value object - persisted daily meal log counter."""

from dataclasses import dataclass, replace
from datetime import date as DateType
from typing import Optional


@dataclass(frozen=True)
class MealLoggingQuota:
    """Meal logging counter for one user and one calendar day.

    ``version`` is the optimistic-concurrency token: every successful
    conditional write stores ``version + 1``.

    Attributes:
        date: Calendar day the counter applies to
        count: Meals logged on ``date``
        limit: Daily limit in force when last written
        version: Write version of the stored document
    """

    date: DateType
    count: int
    limit: int
    version: int = 0

    def __post_init__(self) -> None:
        """Validate counter values.

        Raises:
            ValueError: If count or version is negative
        """
        if self.count < 0:
            raise ValueError(f"Quota count must be non-negative, got {self.count}")
        if self.version < 0:
            raise ValueError(f"Quota version must be non-negative, got {self.version}")

    @staticmethod
    def fresh(today: DateType, limit: int, version: int = 0) -> "MealLoggingQuota":
        """Counter for a day with nothing logged yet."""
        return MealLoggingQuota(date=today, count=0, limit=limit, version=version)

    def is_current(self, today: DateType) -> bool:
        """Whether this counter belongs to ``today``."""
        return self.date == today

    def rolled_over(self, today: DateType, limit: int) -> "MealLoggingQuota":
        """Counter reset for ``today``; keeps the version for the next write."""
        return MealLoggingQuota.fresh(today, limit, version=self.version)

    def with_limit(self, limit: int) -> "MealLoggingQuota":
        return replace(self, limit=limit)

    def incremented(self) -> "MealLoggingQuota":
        """Counter after one more logged meal."""
        return replace(self, count=self.count + 1)

    def is_exhausted(self, limit: Optional[int] = None) -> bool:
        """Whether no more meals may be logged under ``limit`` (default: own)."""
        effective = self.limit if limit is None else limit
        return effective >= 0 and self.count >= effective

    def remaining(self, limit: Optional[int] = None) -> int:
        """Meals still allowed under ``limit`` (default: own), never negative."""
        effective = self.limit if limit is None else limit
        return max(effective - self.count, 0)
