"""Ports for access tier gating."""

from .clock import IClock
from .quota_store import IQuotaStore

__all__ = [
    "IClock",
    "IQuotaStore",
]
