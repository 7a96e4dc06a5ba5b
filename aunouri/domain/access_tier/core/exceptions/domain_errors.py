"""Domain exceptions for access tier gating."""

from typing import Optional


class AccessTierError(Exception):
    """Base exception for access tier domain errors."""

    pass


class UnknownFeatureError(AccessTierError, ValueError):
    """Raised when a feature identifier is not a known tiered feature."""

    def __init__(self, feature: object):
        super().__init__(f"Unknown tiered feature: {feature!r}")
        self.feature = feature


class UnknownTierError(AccessTierError, ValueError):
    """Raised when a tier identifier is not a known user tier."""

    def __init__(self, tier: object):
        super().__init__(f"Unknown user tier: {tier!r}")
        self.tier = tier


class StorageUnavailableError(AccessTierError):
    """Raised when the quota store cannot be read or written."""

    def __init__(self, operation: str, user_id: str, cause: Optional[BaseException] = None):
        message = f"Quota store unavailable during {operation} for user {user_id}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.operation = operation
        self.user_id = user_id
        self.cause = cause


class ConcurrentUpdateConflict(AccessTierError):
    """Raised when a conditional quota write keeps losing to other writers."""

    def __init__(self, user_id: str, attempts: int):
        super().__init__(
            f"Meal logging quota for user {user_id} changed concurrently "
            f"({attempts} attempts)"
        )
        self.user_id = user_id
        self.attempts = attempts
