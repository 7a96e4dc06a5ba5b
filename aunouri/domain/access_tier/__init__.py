"""Access tier domain.

Tier-based feature gating: capability flags, rolling day windows and the
daily meal logging quota.
"""

from .core.exceptions import (
    AccessTierError,
    ConcurrentUpdateConflict,
    StorageUnavailableError,
    UnknownFeatureError,
    UnknownTierError,
)
from .core.policies import TIER_LIMITS
from .core.value_objects import (
    UNLIMITED,
    MealLoggingQuota,
    MealLoggingStatus,
    MealLogResult,
    TieredFeature,
    TierLimits,
    UserTier,
)
from .services import AccessTierGate

__all__ = [
    "AccessTierGate",
    "TIER_LIMITS",
    "UNLIMITED",
    "UserTier",
    "TieredFeature",
    "TierLimits",
    "MealLoggingQuota",
    "MealLoggingStatus",
    "MealLogResult",
    "AccessTierError",
    "UnknownFeatureError",
    "UnknownTierError",
    "StorageUnavailableError",
    "ConcurrentUpdateConflict",
]
