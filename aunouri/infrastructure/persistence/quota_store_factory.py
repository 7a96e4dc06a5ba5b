"""Factory for creating quota store instances."""

from typing import Optional

import structlog

from aunouri.domain.access_tier.core.ports.quota_store import IQuotaStore
from aunouri.infrastructure.config import get_mongodb_uri, get_repository_backend
from aunouri.infrastructure.persistence.in_memory.quota_store import (
    InMemoryQuotaStore,
)

logger = structlog.get_logger(__name__)

# Singleton instance
_quota_store: Optional[IQuotaStore] = None


def create_quota_store() -> IQuotaStore:
    """
    Create quota store based on REPOSITORY_BACKEND configuration.

    Environment Variables:
        REPOSITORY_BACKEND: 'inmemory' (default) or 'mongodb'
        MONGODB_URI: MongoDB connection URI (required for 'mongodb')

    Returns:
        IQuotaStore implementation

    Raises:
        ValueError: If REPOSITORY_BACKEND='mongodb' but MONGODB_URI not set
    """
    backend = get_repository_backend()

    if backend == "mongodb":
        if not get_mongodb_uri():
            raise ValueError("REPOSITORY_BACKEND='mongodb' requires MONGODB_URI env var")

        from aunouri.infrastructure.persistence.mongodb.quota_store import (
            MongoQuotaStore,
        )

        return MongoQuotaStore()

    if backend != "inmemory":
        logger.warning("Unknown repository backend, using inmemory", backend=backend)
    return InMemoryQuotaStore()


def get_quota_store() -> IQuotaStore:
    """
    Get singleton quota store instance.

    Lazy initialization on first call.
    """
    global _quota_store
    if _quota_store is None:
        _quota_store = create_quota_store()
    return _quota_store


def reset_quota_store() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _quota_store
    _quota_store = None
