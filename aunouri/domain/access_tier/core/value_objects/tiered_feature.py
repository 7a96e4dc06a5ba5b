"""TieredFeature value object - features whose access depends on tier."""

from enum import Enum
from typing import Union

from ..exceptions.domain_errors import UnknownFeatureError


class FeatureKind(str, Enum):
    """How a feature is limited."""

    DAILY_QUOTA = "daily_quota"
    DAY_WINDOW = "day_window"
    CAPABILITY = "capability"


class TieredFeature(str, Enum):
    """Feature gated by account tier.

    - MEAL_LOGGING: daily quota of logged meals
    - MEAL_HISTORY, CYCLE_TRACKING, MEAL_RECOMMENDATIONS: rolling day window
    - HEALTH_SYNC, FRIENDS, MEAL_PLANS, ANALYTICS: on/off capability
    """

    MEAL_LOGGING = "meal_logging"
    MEAL_HISTORY = "meal_history"
    CYCLE_TRACKING = "cycle_tracking"
    MEAL_RECOMMENDATIONS = "meal_recommendations"
    HEALTH_SYNC = "health_sync"
    FRIENDS = "friends"
    MEAL_PLANS = "meal_plans"
    ANALYTICS = "analytics"

    @property
    def kind(self) -> FeatureKind:
        return _KINDS[self]

    @property
    def is_day_limited(self) -> bool:
        return self.kind is FeatureKind.DAY_WINDOW

    @property
    def is_capability(self) -> bool:
        return self.kind is FeatureKind.CAPABILITY

    @classmethod
    def parse(cls, value: Union["TieredFeature", str]) -> "TieredFeature":
        """Coerce a feature or its string value.

        Raises:
            UnknownFeatureError: If the value is not a known feature
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownFeatureError(value) from None

    @classmethod
    def day_limited(cls) -> tuple:
        """Features limited by a rolling day window, in declaration order."""
        return tuple(feature for feature in cls if feature.is_day_limited)

    @classmethod
    def capabilities(cls) -> tuple:
        """On/off capability features, in declaration order."""
        return tuple(feature for feature in cls if feature.is_capability)


_KINDS = {
    TieredFeature.MEAL_LOGGING: FeatureKind.DAILY_QUOTA,
    TieredFeature.MEAL_HISTORY: FeatureKind.DAY_WINDOW,
    TieredFeature.CYCLE_TRACKING: FeatureKind.DAY_WINDOW,
    TieredFeature.MEAL_RECOMMENDATIONS: FeatureKind.DAY_WINDOW,
    TieredFeature.HEALTH_SYNC: FeatureKind.CAPABILITY,
    TieredFeature.FRIENDS: FeatureKind.CAPABILITY,
    TieredFeature.MEAL_PLANS: FeatureKind.CAPABILITY,
    TieredFeature.ANALYTICS: FeatureKind.CAPABILITY,
}
