"""TierLimits value object - per-tier feature allowances."""

from dataclasses import dataclass
from typing import Union

from .tiered_feature import FeatureKind, TieredFeature

UNLIMITED = -1


def is_unlimited(limit: int) -> bool:
    """Whether a numeric allowance means "no limit"."""
    return limit == UNLIMITED


def allowance_at_least(higher: int, lower: int) -> bool:
    """Compare two numeric allowances where ``UNLIMITED`` dominates."""
    if is_unlimited(higher):
        return True
    if is_unlimited(lower):
        return False
    return higher >= lower


@dataclass(frozen=True)
class TierLimits:
    """Feature allowances for one tier.

    Numeric allowances use ``UNLIMITED`` (-1) for no limit.

    Attributes:
        cycle_tracking: Days of cycle history visible
        meal_recommendations: Days of recommendations visible
        meal_history: Days of meal history visible
        meal_logging: Meals that may be logged per day
        health_sync: Health platform sync enabled
        friends: Social features enabled
        meal_plans: Meal plans enabled
        analytics: Analytics enabled
    """

    cycle_tracking: int
    meal_recommendations: int
    meal_history: int
    meal_logging: int
    health_sync: bool
    friends: bool
    meal_plans: bool
    analytics: bool

    def __post_init__(self) -> None:
        """Validate numeric allowances.

        Raises:
            ValueError: If an allowance is below ``UNLIMITED``
        """
        for feature in (*TieredFeature.day_limited(), TieredFeature.MEAL_LOGGING):
            value = getattr(self, feature.value)
            if value < UNLIMITED:
                raise ValueError(f"{feature.value} limit must be >= -1, got {value}")

    def day_limit(self, feature: Union[TieredFeature, str]) -> int:
        """Day window for a day-limited feature.

        Raises:
            UnknownFeatureError: If the feature is unknown
            ValueError: If the feature is not day-limited
        """
        parsed = TieredFeature.parse(feature)
        if not parsed.is_day_limited:
            raise ValueError(f"{parsed.value} is not a day-limited feature")
        return getattr(self, parsed.value)

    def has_capability(self, feature: Union[TieredFeature, str]) -> bool:
        """Whether a capability feature is enabled.

        Raises:
            UnknownFeatureError: If the feature is unknown
            ValueError: If the feature is not a capability
        """
        parsed = TieredFeature.parse(feature)
        if not parsed.is_capability:
            raise ValueError(f"{parsed.value} is not a capability feature")
        return getattr(self, parsed.value)

    def allows_at_least(self, other: "TierLimits") -> bool:
        """Whether every allowance here is at least as generous as ``other``."""
        for feature in TieredFeature:
            mine = getattr(self, feature.value)
            theirs = getattr(other, feature.value)
            if feature.kind is FeatureKind.CAPABILITY:
                if theirs and not mine:
                    return False
            elif not allowance_at_least(mine, theirs):
                return False
        return True
