"""UserTier value object - account privilege level."""

from enum import Enum
from typing import Union

from ..exceptions.domain_errors import UnknownTierError


class UserTier(str, Enum):
    """Privilege level of a user account, ordered guest < registered < premium.

    Comparison operators follow privilege order, not string order.
    """

    GUEST = "guest"
    REGISTERED = "registered"
    PREMIUM = "premium"

    @property
    def rank(self) -> int:
        """Position in privilege order (0 = least privileged)."""
        return _RANKS[self]

    @property
    def display_name(self) -> str:
        """Name shown to users (registered accounts are the free plan)."""
        return _DISPLAY_NAMES[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UserTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, UserTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, UserTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, UserTier):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: Union["UserTier", str]) -> "UserTier":
        """Coerce a tier or its string value.

        Raises:
            UnknownTierError: If the value is not a known tier
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.lower() if isinstance(value, str) else value)
        except ValueError:
            raise UnknownTierError(value) from None

    @classmethod
    def for_auth_state(cls, is_authenticated: bool, is_premium: bool = False) -> "UserTier":
        """Resolve the tier from authentication and subscription state."""
        if not is_authenticated:
            return cls.GUEST
        return cls.PREMIUM if is_premium else cls.REGISTERED


_RANKS = {
    UserTier.GUEST: 0,
    UserTier.REGISTERED: 1,
    UserTier.PREMIUM: 2,
}

_DISPLAY_NAMES = {
    UserTier.GUEST: "Guest",
    UserTier.REGISTERED: "Free",
    UserTier.PREMIUM: "Premium",
}
