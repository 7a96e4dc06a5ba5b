"""RecordMealLogCommand - count a logged meal against the daily quota."""

from dataclasses import dataclass
from typing import Union

import structlog

from aunouri.domain.access_tier.core.value_objects.meal_logging_status import (
    MealLogResult,
)
from aunouri.domain.access_tier.core.value_objects.user_tier import UserTier
from aunouri.domain.access_tier.services.access_tier_gate import AccessTierGate

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RecordMealLogCommand:
    """Command to count one logged meal.

    Attributes:
        user_id: User logging the meal
        tier: User's current tier
    """

    user_id: str
    tier: Union[UserTier, str]


class RecordMealLogHandler:
    """Handler for RecordMealLogCommand.

    Delegates to the gate's atomic check-and-increment; callers save the
    meal only when ``result.recorded`` is True.
    """

    def __init__(self, gate: AccessTierGate):
        self._gate = gate

    async def handle(self, command: RecordMealLogCommand) -> MealLogResult:
        """
        Handle meal log command.

        Args:
            command: RecordMealLogCommand with user and tier

        Returns:
            MealLogResult with the quota status after the attempt

        Raises:
            ValueError: If user_id is empty
            UnknownTierError: If the tier is unknown
        """
        if not command.user_id:
            raise ValueError("user_id is required")

        result = await self._gate.record_meal_log(command.user_id, command.tier)

        if not result.recorded:
            logger.info(
                "Meal log refused",
                user_id=command.user_id,
                remaining=result.status.remaining,
                limit=result.status.limit,
                error=type(result.error).__name__ if result.error else None,
            )
        return result
