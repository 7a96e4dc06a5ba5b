"""Unit tests for the static tier tables."""

import pytest

from aunouri.domain.access_tier.core.policies import (
    GENERIC_MESSAGES,
    TIER_LIMITS,
    UPGRADE_MESSAGES,
    is_monotonic,
    limits_for,
)
from aunouri.domain.access_tier.core.value_objects import (
    UNLIMITED,
    TieredFeature,
    TierLimits,
    UserTier,
)


class TestTierLimitsTable:
    """Test the allowance table."""

    def test_every_tier_configured(self):
        """Test no tier is missing."""
        assert set(TIER_LIMITS) == set(UserTier)

    def test_guest_limits(self):
        """Test guest allowances."""
        limits = limits_for("guest")

        assert limits.meal_logging == 3
        for feature in TieredFeature.day_limited():
            assert limits.day_limit(feature) == 3
        for feature in TieredFeature.capabilities():
            assert limits.has_capability(feature) is False

    def test_registered_limits(self):
        """Test registered allowances."""
        limits = limits_for(UserTier.REGISTERED)

        assert limits.meal_logging == UNLIMITED
        assert limits.meal_history == 7
        assert limits.health_sync and limits.friends
        assert not limits.meal_plans and not limits.analytics

    def test_premium_unlimited(self):
        """Test premium has everything."""
        limits = limits_for("premium")

        for feature in TieredFeature.day_limited():
            assert limits.day_limit(feature) == UNLIMITED
        for feature in TieredFeature.capabilities():
            assert limits.has_capability(feature) is True

    def test_monotonic(self):
        """Test higher tiers are never less generous."""
        assert is_monotonic()

    def test_day_windows_monotonic(self):
        """Test registered >= guest and premium unlimited or >= registered."""
        for feature in TieredFeature.day_limited():
            guest = limits_for("guest").day_limit(feature)
            registered = limits_for("registered").day_limit(feature)
            premium = limits_for("premium").day_limit(feature)

            assert registered >= guest
            assert premium == UNLIMITED or premium >= registered

    def test_non_monotonic_table_detected(self):
        """Test a table where premium loses a capability is flagged."""
        table = dict(TIER_LIMITS)
        table[UserTier.PREMIUM] = TierLimits(
            cycle_tracking=UNLIMITED,
            meal_recommendations=UNLIMITED,
            meal_history=UNLIMITED,
            meal_logging=UNLIMITED,
            health_sync=False,
            friends=True,
            meal_plans=True,
            analytics=True,
        )

        assert not is_monotonic(table)

    def test_table_is_read_only(self):
        """Test the table cannot be mutated."""
        with pytest.raises(TypeError):
            TIER_LIMITS[UserTier.GUEST] = TIER_LIMITS[UserTier.PREMIUM]  # type: ignore[index]


class TestUpgradeMessages:
    """Test message tables."""

    def test_premium_has_no_messages(self):
        """Test premium never gets a prompt."""
        assert dict(UPGRADE_MESSAGES[UserTier.PREMIUM]) == {}
        assert GENERIC_MESSAGES[UserTier.PREMIUM] == ""

    def test_every_tier_has_generic_message(self):
        """Test fallback exists for every tier."""
        assert set(GENERIC_MESSAGES) == set(UserTier)
