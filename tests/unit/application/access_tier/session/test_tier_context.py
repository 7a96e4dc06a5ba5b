"""Tests for TierContext."""

import pytest

from aunouri.application.access_tier.session.tier_context import TierContext
from aunouri.domain.access_tier.core.exceptions import UnknownTierError
from aunouri.domain.access_tier.core.value_objects import UserTier


def test_defaults_to_guest():
    """Test a new session starts as guest."""
    assert TierContext().tier is UserTier.GUEST


def test_set_user_tier_is_idempotent(gate):
    """Test setting registered twice leaves limits unchanged."""
    context = TierContext()

    context.set_user_tier("registered")
    first = gate.get_limits_for_tier(context.tier)
    context.set_user_tier("registered")
    second = gate.get_limits_for_tier(context.tier)

    assert context.tier is UserTier.REGISTERED
    assert first == second


def test_last_write_wins():
    """Test later assignments override earlier ones."""
    context = TierContext()

    context.set_user_tier(UserTier.PREMIUM)
    context.set_user_tier(UserTier.GUEST)

    assert context.tier is UserTier.GUEST


def test_unknown_tier_rejected():
    """Test unknown tier leaves state unchanged."""
    context = TierContext("registered")

    with pytest.raises(UnknownTierError):
        context.set_user_tier("vip")

    assert context.tier is UserTier.REGISTERED


@pytest.mark.parametrize(
    "user_id,is_premium,expected",
    [
        (None, False, UserTier.GUEST),
        ("user-1", False, UserTier.REGISTERED),
        ("user-1", True, UserTier.PREMIUM),
    ],
)
def test_on_auth_state_changed(user_id, is_premium, expected):
    """Test tier re-evaluated from authentication state."""
    context = TierContext()

    assert context.on_auth_state_changed(user_id, is_premium=is_premium) is expected
    assert context.tier is expected


def test_sign_out_returns_to_guest():
    """Test signing out drops back to guest."""
    context = TierContext()
    context.on_auth_state_changed("user-1")

    context.on_auth_state_changed(None)

    assert context.tier is UserTier.GUEST


def test_clear():
    """Test clear resets to guest."""
    context = TierContext(UserTier.PREMIUM)

    context.clear()

    assert context.tier is UserTier.GUEST
