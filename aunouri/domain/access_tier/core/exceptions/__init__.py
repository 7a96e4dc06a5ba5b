"""Domain exceptions for access tier gating."""

from .domain_errors import (
    AccessTierError,
    ConcurrentUpdateConflict,
    StorageUnavailableError,
    UnknownFeatureError,
    UnknownTierError,
)

__all__ = [
    "AccessTierError",
    "UnknownFeatureError",
    "UnknownTierError",
    "StorageUnavailableError",
    "ConcurrentUpdateConflict",
]
