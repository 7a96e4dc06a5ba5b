"""Static allowance table for every tier.

Adding a tier or feature is a change to this table, not to gate logic.
"""

from types import MappingProxyType
from typing import Mapping, Union

from ..value_objects.tier_limits import UNLIMITED, TierLimits
from ..value_objects.user_tier import UserTier

TIER_LIMITS: Mapping[UserTier, TierLimits] = MappingProxyType(
    {
        UserTier.GUEST: TierLimits(
            cycle_tracking=3,
            meal_recommendations=3,
            meal_history=3,
            meal_logging=3,
            health_sync=False,
            friends=False,
            meal_plans=False,
            analytics=False,
        ),
        UserTier.REGISTERED: TierLimits(
            cycle_tracking=7,
            meal_recommendations=7,
            meal_history=7,
            meal_logging=UNLIMITED,
            health_sync=True,
            friends=True,
            meal_plans=False,
            analytics=False,
        ),
        UserTier.PREMIUM: TierLimits(
            cycle_tracking=UNLIMITED,
            meal_recommendations=UNLIMITED,
            meal_history=UNLIMITED,
            meal_logging=UNLIMITED,
            health_sync=True,
            friends=True,
            meal_plans=True,
            analytics=True,
        ),
    }
)


def limits_for(tier: Union[UserTier, str]) -> TierLimits:
    """Look up the allowances of a tier.

    Raises:
        UnknownTierError: If the tier is unknown
    """
    return TIER_LIMITS[UserTier.parse(tier)]


def is_monotonic(table: Mapping[UserTier, TierLimits] = TIER_LIMITS) -> bool:
    """Whether no tier is strictly less generous than a lower tier."""
    ordered = sorted(table)
    return all(
        table[higher].allows_at_least(table[lower])
        for lower, higher in zip(ordered, ordered[1:])
    )
