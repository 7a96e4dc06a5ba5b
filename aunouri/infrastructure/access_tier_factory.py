"""Wiring of the access tier gate from configuration."""

from typing import Optional

from aunouri.domain.access_tier.core.ports.clock import IClock
from aunouri.domain.access_tier.core.ports.quota_store import IQuotaStore
from aunouri.domain.access_tier.services.access_tier_gate import AccessTierGate
from aunouri.infrastructure.clock.system_clock import SystemClock
from aunouri.infrastructure.persistence.quota_store_factory import get_quota_store


def create_access_tier_gate(
    store: Optional[IQuotaStore] = None,
    clock: Optional[IClock] = None,
) -> AccessTierGate:
    """
    Build a gate from configuration.

    Args:
        store: Quota store (default: singleton from REPOSITORY_BACKEND)
        clock: Clock (default: system clock in AUNOURI_TIMEZONE)

    Returns:
        AccessTierGate ready for use
    """
    return AccessTierGate(
        store=store or get_quota_store(),
        clock=clock or SystemClock(),
    )
