"""Access tier domain services."""

from .access_tier_gate import AccessTierGate

__all__ = ["AccessTierGate"]
