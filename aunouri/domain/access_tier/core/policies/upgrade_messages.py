"""Upgrade prompts shown when a tier hits a feature limit."""

from types import MappingProxyType
from typing import Mapping

from ..value_objects.tiered_feature import TieredFeature
from ..value_objects.user_tier import UserTier

_GUEST_HISTORY = "Create a free account to access 7 days of history!"
_GUEST_UNLOCK = "Create a free account to unlock this feature!"
_REGISTERED_HISTORY = "Upgrade to Premium for unlimited history!"
_REGISTERED_UNLOCK = "Upgrade to Premium to unlock this feature!"

UPGRADE_MESSAGES: Mapping[UserTier, Mapping[TieredFeature, str]] = MappingProxyType(
    {
        UserTier.GUEST: MappingProxyType(
            {
                TieredFeature.MEAL_LOGGING: "Create a free account for unlimited meal logging!",
                TieredFeature.MEAL_HISTORY: _GUEST_HISTORY,
                TieredFeature.CYCLE_TRACKING: _GUEST_HISTORY,
                TieredFeature.MEAL_RECOMMENDATIONS: _GUEST_HISTORY,
                TieredFeature.HEALTH_SYNC: _GUEST_UNLOCK,
                TieredFeature.FRIENDS: _GUEST_UNLOCK,
            }
        ),
        UserTier.REGISTERED: MappingProxyType(
            {
                TieredFeature.MEAL_HISTORY: _REGISTERED_HISTORY,
                TieredFeature.CYCLE_TRACKING: _REGISTERED_HISTORY,
                TieredFeature.MEAL_RECOMMENDATIONS: _REGISTERED_HISTORY,
                TieredFeature.MEAL_PLANS: _REGISTERED_UNLOCK,
                TieredFeature.ANALYTICS: _REGISTERED_UNLOCK,
            }
        ),
        UserTier.PREMIUM: MappingProxyType({}),
    }
)

# Used for features without a specific message, including unknown ones
GENERIC_MESSAGES: Mapping[UserTier, str] = MappingProxyType(
    {
        UserTier.GUEST: "Upgrade to Premium for full access!",
        UserTier.REGISTERED: "Upgrade to Premium for the full experience!",
        UserTier.PREMIUM: "",
    }
)
