"""TierContext - the tier of the current user session."""

from typing import Optional, Union

import structlog

from aunouri.domain.access_tier.core.value_objects.user_tier import UserTier

logger = structlog.get_logger(__name__)


class TierContext:
    """Holds the tier of one user session.

    The gate never reads this object; callers pass ``context.tier`` into
    each gate call. Re-evaluate on every authentication state change.
    """

    def __init__(self, tier: Union[UserTier, str] = UserTier.GUEST) -> None:
        self._tier = UserTier.parse(tier)

    @property
    def tier(self) -> UserTier:
        return self._tier

    def set_user_tier(self, tier: Union[UserTier, str]) -> None:
        """Set the session tier. Idempotent; last write wins.

        Raises:
            UnknownTierError: If the tier is unknown
        """
        parsed = UserTier.parse(tier)
        if parsed is not self._tier:
            logger.debug("User tier changed", previous=self._tier.value, tier=parsed.value)
        self._tier = parsed

    def on_auth_state_changed(
        self, user_id: Optional[str], is_premium: bool = False
    ) -> UserTier:
        """Re-evaluate the tier from authentication state.

        Args:
            user_id: Authenticated user, None when signed out
            is_premium: Whether the user holds a premium subscription

        Returns:
            UserTier: The tier now in effect
        """
        self.set_user_tier(
            UserTier.for_auth_state(user_id is not None, is_premium=is_premium)
        )
        return self._tier

    def clear(self) -> None:
        """Forget the session tier (logout)."""
        self._tier = UserTier.GUEST
