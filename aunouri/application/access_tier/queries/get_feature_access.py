"""GetFeatureAccessQuery - everything a screen needs to gate its content."""

from dataclasses import dataclass
from datetime import date as DateType
from typing import Dict, Optional, Union

from aunouri.domain.access_tier.core.value_objects.meal_logging_status import (
    MealLoggingStatus,
)
from aunouri.domain.access_tier.core.value_objects.tiered_feature import TieredFeature
from aunouri.domain.access_tier.core.value_objects.user_tier import UserTier
from aunouri.domain.access_tier.services.access_tier_gate import AccessTierGate


@dataclass(frozen=True)
class FeatureAccessSnapshot:
    """Feature access of one user at one point in time.

    Attributes:
        tier: Tier the snapshot was computed for
        tier_name: Display name of the tier
        capabilities: Capability feature -> enabled
        day_limits: Day-limited feature -> days (-1 unlimited)
        cutoff_dates: Day-limited feature -> earliest visible day (None unlimited)
        meal_logging: Today's meal logging status
    """

    tier: UserTier
    tier_name: str
    capabilities: Dict[TieredFeature, bool]
    day_limits: Dict[TieredFeature, int]
    cutoff_dates: Dict[TieredFeature, Optional[DateType]]
    meal_logging: MealLoggingStatus

    @property
    def is_guest(self) -> bool:
        return self.tier is UserTier.GUEST

    @property
    def is_registered(self) -> bool:
        return self.tier is UserTier.REGISTERED

    @property
    def is_premium(self) -> bool:
        return self.tier is UserTier.PREMIUM

    def can_access(self, feature: Union[TieredFeature, str]) -> bool:
        """Capability flag, or True for features limited by days/quota."""
        parsed = TieredFeature.parse(feature)
        return self.capabilities.get(parsed, True)


@dataclass(frozen=True)
class GetFeatureAccessQuery:
    """Query for a feature access snapshot.

    Attributes:
        user_id: User whose meal logging quota is read
        tier: User's current tier
    """

    user_id: str
    tier: Union[UserTier, str]


class GetFeatureAccessHandler:
    """Handler for GetFeatureAccessQuery.

    Re-run after any quota mutation; the snapshot is not live.
    """

    def __init__(self, gate: AccessTierGate):
        self._gate = gate

    async def handle(self, query: GetFeatureAccessQuery) -> FeatureAccessSnapshot:
        """
        Handle feature access query.

        Args:
            query: GetFeatureAccessQuery with user and tier

        Returns:
            FeatureAccessSnapshot for the tier
        """
        tier = UserTier.parse(query.tier)
        limits = self._gate.get_limits_for_tier(tier)

        capabilities = {
            feature: limits.has_capability(feature)
            for feature in TieredFeature.capabilities()
        }
        day_limits = {
            feature: limits.day_limit(feature) for feature in TieredFeature.day_limited()
        }
        cutoff_dates = {
            feature: self._gate.get_cutoff_date(feature, tier)
            for feature in TieredFeature.day_limited()
        }
        meal_logging = await self._gate.can_log_meal(query.user_id, tier)

        return FeatureAccessSnapshot(
            tier=tier,
            tier_name=tier.display_name,
            capabilities=capabilities,
            day_limits=day_limits,
            cutoff_dates=cutoff_dates,
            meal_logging=meal_logging,
        )
