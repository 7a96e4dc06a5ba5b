"""GoalEstimateService - weeks needed to reach a target weight."""

import math
from typing import Union

from ..core.ports.calculators import IGoalEstimator
from ..core.value_objects.goal_estimate import GoalEstimate
from ..core.value_objects.biometric_profile import MAX_WEIGHT_KG
from ..core.value_objects.validation import coerce_enum, require_positive_number
from ..core.value_objects.weight_goal import WeightGoal

# Quotients are rounded to this many decimals before ceil so float noise
# (3 / 0.3 == 10.000000000000002) does not add a week.
_QUOTIENT_PRECISION = 9


class GoalEstimateService(IGoalEstimator):
    """Project time to goal at a fixed weekly pace.

    Pace:
        - Lose: 0.5 kg/week
        - Gain: 0.3 kg/week

    No estimate (0 weeks) is produced for the maintain goal, when the
    target equals the current weight, or when the target lies in the
    opposite direction of the goal (e.g. lose with a higher target).
    """

    def estimate(
        self,
        current_weight: float,
        target_weight: float,
        weight_goal: Union[WeightGoal, str],
    ) -> GoalEstimate:
        """Estimate weeks to goal.

        Raises:
            InvalidInputError: If a weight is not a positive number of at most
                700 kg or the goal is not recognized

        Example:
            >>> GoalEstimateService().estimate(80, 70, "lose").weeks
            20
        """
        current = require_positive_number(
            "current_weight", current_weight, MAX_WEIGHT_KG
        )
        target = require_positive_number(
            "target_weight", target_weight, MAX_WEIGHT_KG
        )
        goal = coerce_enum(WeightGoal, "weight_goal", weight_goal)

        delta = target - current
        rate = goal.weekly_rate_kg()
        consistent = delta != 0 and (delta > 0) == (goal.direction() > 0)

        if rate is None or not consistent:
            return GoalEstimate(
                weeks=0,
                current_weight_kg=current,
                target_weight_kg=target,
                weight_goal=goal,
            )

        weeks = math.ceil(round(abs(delta) / rate, _QUOTIENT_PRECISION))
        return GoalEstimate(
            weeks=weeks,
            current_weight_kg=current,
            target_weight_kg=target,
            weight_goal=goal,
            weekly_rate_kg=rate,
        )

    def estimate_weeks(
        self,
        current_weight: float,
        target_weight: float,
        weight_goal: Union[WeightGoal, str],
    ) -> int:
        """Shortcut returning only the number of weeks."""
        return self.estimate(current_weight, target_weight, weight_goal).weeks
