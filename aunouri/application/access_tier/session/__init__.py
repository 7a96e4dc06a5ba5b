"""Session state for access tier gating."""

from .tier_context import TierContext

__all__ = ["TierContext"]
