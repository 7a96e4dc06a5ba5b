"""AccessTierGate - tier-based feature gating and daily meal quotas."""

from datetime import date, timedelta
from typing import Mapping, Optional, Union

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
)

from ..core.exceptions.domain_errors import (
    ConcurrentUpdateConflict,
    StorageUnavailableError,
    UnknownFeatureError,
)
from ..core.policies.tier_limits_table import TIER_LIMITS
from ..core.policies.upgrade_messages import GENERIC_MESSAGES, UPGRADE_MESSAGES
from ..core.ports.clock import IClock
from ..core.ports.quota_store import IQuotaStore
from ..core.value_objects.meal_logging_quota import MealLoggingQuota
from ..core.value_objects.meal_logging_status import MealLoggingStatus, MealLogResult
from ..core.value_objects.tier_limits import TierLimits, is_unlimited
from ..core.value_objects.tiered_feature import TieredFeature
from ..core.value_objects.user_tier import UserTier

logger = structlog.get_logger(__name__)

TierInput = Union[UserTier, str]
FeatureInput = Union[TieredFeature, str]

# One initial conditional write plus one retry
DEFAULT_MAX_ATTEMPTS = 2


class AccessTierGate:
    """Decide what a tier may do, and enforce the daily meal logging quota.

    The tier is passed explicitly on every call. Quota counters live in an
    ``IQuotaStore`` and roll over lazily: the first access on a new calendar
    day (according to ``IClock``) resets the counter.

    Writes are conditional on the version read, so concurrent loggers for
    the same user can neither under-count nor exceed the limit. A lost
    write is retried once; storage failures and repeated conflicts produce
    a denied status carrying the error instead of raising.
    """

    def __init__(
        self,
        store: IQuotaStore,
        clock: IClock,
        limits: Mapping[UserTier, TierLimits] = TIER_LIMITS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._store = store
        self._clock = clock
        self._limits = limits
        self._max_attempts = max_attempts

    # ============================================================
    # Static tier policy
    # ============================================================

    def get_limits_for_tier(self, tier: TierInput) -> TierLimits:
        """Allowances of a tier.

        Raises:
            UnknownTierError: If the tier is unknown
        """
        return self._limits[UserTier.parse(tier)]

    def has_access(self, feature: FeatureInput, tier: TierInput) -> bool:
        """Whether a tier can use a feature at all.

        Capabilities report their flag; limited features are accessible
        unless their allowance is zero.
        """
        parsed = TieredFeature.parse(feature)
        value = getattr(self.get_limits_for_tier(tier), parsed.value)
        if parsed.is_capability:
            return bool(value)
        return value != 0

    def get_day_limit(self, feature: FeatureInput, tier: TierInput) -> int:
        """Day window of a day-limited feature (-1 when unlimited)."""
        return self.get_limits_for_tier(tier).day_limit(feature)

    def get_cutoff_date(self, feature: FeatureInput, tier: TierInput) -> Optional[date]:
        """Earliest calendar day a tier may view for a feature.

        Returns:
            Optional[date]: ``today - limit days``; None when the tier is
                unlimited or the feature is not day-limited

        Raises:
            UnknownFeatureError: If the feature is unknown
        """
        parsed = TieredFeature.parse(feature)
        if not parsed.is_day_limited:
            return None
        limit = self.get_day_limit(parsed, tier)
        if is_unlimited(limit):
            return None
        return self._clock.today() - timedelta(days=limit)

    def get_upgrade_message(self, feature: FeatureInput, tier: TierInput) -> str:
        """Prompt explaining what upgrading unlocks.

        Unknown features get the tier's generic message; premium has nothing
        to upgrade to and always gets an empty string.
        """
        parsed_tier = UserTier.parse(tier)
        try:
            parsed_feature = TieredFeature.parse(feature)
        except UnknownFeatureError:
            return GENERIC_MESSAGES[parsed_tier]
        return UPGRADE_MESSAGES[parsed_tier].get(
            parsed_feature, GENERIC_MESSAGES[parsed_tier]
        )

    def get_tier_name(self, tier: TierInput) -> str:
        """Display name of a tier."""
        return UserTier.parse(tier).display_name

    # ============================================================
    # Meal logging quota
    # ============================================================

    async def can_log_meal(self, user_id: str, tier: TierInput) -> MealLoggingStatus:
        """Check whether another meal may be logged today.

        Unlimited tiers bypass the counter. A stale counter from a previous
        day is reset and the reset persisted.

        Args:
            user_id: User whose counter is checked
            tier: User's current tier

        Returns:
            MealLoggingStatus: Denied with ``error`` set if the store failed
        """
        limit = self._meal_logging_limit(tier)
        if is_unlimited(limit):
            return MealLoggingStatus.unlimited()

        today = self._clock.today()
        try:
            async for attempt in self._retrying():
                with attempt:
                    status = await self._check_quota(
                        user_id, today, limit, attempt.retry_state.attempt_number
                    )
        except StorageUnavailableError as e:
            return self._storage_failure("can_log_meal", user_id, limit, e).status
        except ConcurrentUpdateConflict as e:
            return self._conflict(e, limit).status
        return status

    async def record_meal_log(self, user_id: str, tier: TierInput) -> MealLogResult:
        """Atomically check the quota and count one logged meal.

        Rollover, limit check and increment are applied in a single
        conditional write. Nothing is written when the quota is exhausted.

        Args:
            user_id: User logging the meal
            tier: User's current tier

        Returns:
            MealLogResult: ``recorded`` is False when the quota is exhausted
                or the store failed (see ``result.error``)
        """
        limit = self._meal_logging_limit(tier)
        if is_unlimited(limit):
            return MealLogResult(recorded=True, status=MealLoggingStatus.unlimited())

        today = self._clock.today()
        try:
            async for attempt in self._retrying():
                with attempt:
                    result = await self._increment_quota(
                        user_id, today, limit, attempt.retry_state.attempt_number
                    )
        except StorageUnavailableError as e:
            return self._storage_failure("record_meal_log", user_id, limit, e)
        except ConcurrentUpdateConflict as e:
            return self._conflict(e, limit)
        return result

    # ============================================================
    # Helpers
    # ============================================================

    def _meal_logging_limit(self, tier: TierInput) -> int:
        return self.get_limits_for_tier(tier).meal_logging

    def _retrying(self) -> AsyncRetrying:
        # No wait between attempts: a lost conditional write is retried at once
        return AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            retry=retry_if_exception_type(ConcurrentUpdateConflict),
            before_sleep=_log_lost_update,
            reraise=True,
        )

    async def _check_quota(
        self, user_id: str, today: date, limit: int, attempt: int
    ) -> MealLoggingStatus:
        """Read the counter, persisting a reset if it belongs to another day."""
        stored = await self._store.get(user_id)
        if stored is not None and stored.is_current(today):
            return self._status(stored, limit)

        if stored is None:
            fresh = MealLoggingQuota.fresh(today, limit)
            written = await self._store.compare_and_set(user_id, fresh, None)
        else:
            fresh = stored.rolled_over(today, limit)
            written = await self._store.compare_and_set(user_id, fresh, stored.version)

        if written is None:
            raise ConcurrentUpdateConflict(user_id, attempt)

        logger.debug(
            "Meal logging quota reset",
            user_id=user_id,
            date=today.isoformat(),
            limit=limit,
        )
        return self._status(written, limit)

    async def _increment_quota(
        self, user_id: str, today: date, limit: int, attempt: int
    ) -> MealLogResult:
        """One conditional increment, rolling the counter over if stale."""
        stored = await self._store.get(user_id)
        if stored is None:
            current = MealLoggingQuota.fresh(today, limit)
            expected_version = None
        elif not stored.is_current(today):
            current = stored.rolled_over(today, limit)
            expected_version = stored.version
        else:
            current = stored.with_limit(limit)
            expected_version = stored.version

        if current.is_exhausted(limit):
            logger.info(
                "Meal logging quota exhausted",
                user_id=user_id,
                count=current.count,
                limit=limit,
            )
            return MealLogResult(recorded=False, status=self._status(current, limit))

        written = await self._store.compare_and_set(
            user_id, current.incremented(), expected_version
        )
        if written is None:
            raise ConcurrentUpdateConflict(user_id, attempt)

        logger.debug(
            "Meal log recorded",
            user_id=user_id,
            count=written.count,
            limit=limit,
        )
        return MealLogResult(recorded=True, status=self._status(written, limit))

    @staticmethod
    def _status(quota: MealLoggingQuota, limit: int) -> MealLoggingStatus:
        return MealLoggingStatus(
            allowed=not quota.is_exhausted(limit),
            remaining=quota.remaining(limit),
            limit=limit,
        )

    @staticmethod
    def _storage_failure(
        operation: str, user_id: str, limit: int, error: StorageUnavailableError
    ) -> MealLogResult:
        logger.error(
            "Quota store unavailable, denying meal logging",
            operation=operation,
            user_id=user_id,
            error=str(error),
        )
        return MealLogResult(recorded=False, status=MealLoggingStatus.denied(limit, error))

    @staticmethod
    def _conflict(error: ConcurrentUpdateConflict, limit: int) -> MealLogResult:
        logger.error(
            "Meal logging quota update conflict",
            user_id=error.user_id,
            attempts=error.attempts,
        )
        return MealLogResult(recorded=False, status=MealLoggingStatus.denied(limit, error))


def _log_lost_update(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Quota write lost to concurrent update, retrying",
        user_id=getattr(error, "user_id", None),
        attempt=retry_state.attempt_number,
    )
