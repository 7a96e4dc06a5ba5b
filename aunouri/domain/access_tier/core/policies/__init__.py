"""Static tier policy tables."""

from .tier_limits_table import TIER_LIMITS, is_monotonic, limits_for
from .upgrade_messages import GENERIC_MESSAGES, UPGRADE_MESSAGES

__all__ = [
    "TIER_LIMITS",
    "limits_for",
    "is_monotonic",
    "UPGRADE_MESSAGES",
    "GENERIC_MESSAGES",
]
