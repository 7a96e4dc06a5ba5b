"""Shared test fixtures.

Provides a controllable clock, a fresh in-memory quota store and a gate
wired to both. No external services are used.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Iterator

import pytest

from aunouri.domain.access_tier.core.ports.clock import IClock
from aunouri.domain.access_tier.services.access_tier_gate import AccessTierGate
from aunouri.infrastructure.persistence.in_memory.quota_store import (
    InMemoryQuotaStore,
)
from aunouri.infrastructure.persistence.quota_store_factory import reset_quota_store

TODAY = date(2024, 3, 15)


class FixedClock(IClock):
    """Clock frozen at a given instant, advanced manually by tests."""

    def __init__(self, current: datetime) -> None:
        self.current = current

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        """Move the clock forward by a timedelta given as keyword arguments."""
        self.current = self.current + timedelta(**kwargs)


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen at 09:30 UTC on TODAY."""
    return FixedClock(datetime(TODAY.year, TODAY.month, TODAY.day, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def store() -> InMemoryQuotaStore:
    """Fresh in-memory quota store."""
    return InMemoryQuotaStore()


@pytest.fixture
def gate(store: InMemoryQuotaStore, clock: FixedClock) -> AccessTierGate:
    """Gate over the in-memory store and fixed clock."""
    return AccessTierGate(store=store, clock=clock)


@pytest.fixture(autouse=True)
def _reset_quota_store_singleton() -> Iterator[None]:
    """Keep the factory singleton from leaking between tests."""
    reset_quota_store()
    yield
    reset_quota_store()


@pytest.fixture
def today() -> date:
    """Calendar day of the fixed clock."""
    return TODAY
