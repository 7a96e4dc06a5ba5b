"""MongoDB quota store."""

from .base import MongoBaseStore
from .quota_store import MongoQuotaStore

__all__ = ["MongoBaseStore", "MongoQuotaStore"]
