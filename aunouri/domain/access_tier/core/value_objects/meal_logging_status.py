"""Meal logging results returned by the gate."""

from dataclasses import dataclass
from typing import Optional

from ..exceptions.domain_errors import AccessTierError
from .tier_limits import UNLIMITED


@dataclass(frozen=True)
class MealLoggingStatus:
    """Whether another meal may be logged today.

    Unlimited tiers report ``remaining == limit == -1``. When the gate had
    to answer conservatively because of a failure, ``allowed`` is False and
    ``error`` carries the typed cause.

    Attributes:
        allowed: A meal may be logged now
        remaining: Meals left today (-1 when unlimited)
        limit: Daily limit (-1 when unlimited)
        error: Failure that forced a denial, if any
    """

    allowed: bool
    remaining: int
    limit: int
    error: Optional[AccessTierError] = None

    @staticmethod
    def unlimited() -> "MealLoggingStatus":
        return MealLoggingStatus(allowed=True, remaining=UNLIMITED, limit=UNLIMITED)

    @staticmethod
    def denied(limit: int, error: Optional[AccessTierError] = None) -> "MealLoggingStatus":
        return MealLoggingStatus(allowed=False, remaining=0, limit=limit, error=error)

    @property
    def is_unlimited(self) -> bool:
        return self.limit == UNLIMITED

    @property
    def degraded(self) -> bool:
        """Whether this answer is a fail-safe default rather than a real count."""
        return self.error is not None


@dataclass(frozen=True)
class MealLogResult:
    """Outcome of an atomic check-and-increment.

    Attributes:
        recorded: The meal was counted
        status: Quota status after the attempt
    """

    recorded: bool
    status: MealLoggingStatus

    @property
    def error(self) -> Optional[AccessTierError]:
        return self.status.error
