"""Value objects for access tier gating."""

from .meal_logging_quota import MealLoggingQuota
from .meal_logging_status import MealLoggingStatus, MealLogResult
from .tier_limits import UNLIMITED, TierLimits, allowance_at_least, is_unlimited
from .tiered_feature import FeatureKind, TieredFeature
from .user_tier import UserTier

__all__ = [
    "UserTier",
    "TieredFeature",
    "FeatureKind",
    "TierLimits",
    "UNLIMITED",
    "is_unlimited",
    "allowance_at_least",
    "MealLoggingQuota",
    "MealLoggingStatus",
    "MealLogResult",
]
