"""In-memory quota store."""

from .quota_store import InMemoryQuotaStore

__all__ = ["InMemoryQuotaStore"]
