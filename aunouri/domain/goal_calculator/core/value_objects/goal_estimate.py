"""GoalEstimate value object - projected time to reach a target weight."""

from dataclasses import dataclass
from typing import Optional

from .weight_goal import WeightGoal


@dataclass(frozen=True)
class GoalEstimate:
    """Projection of weeks needed to reach a target weight.

    ``weeks`` is 0 and ``weekly_rate_kg`` is None when there is no
    meaningful estimate (maintain goal, target equal to current weight,
    or target on the wrong side of current weight for the goal).

    Attributes:
        weeks: Whole weeks to goal (>= 0)
        current_weight_kg: Starting weight
        target_weight_kg: Desired weight
        weight_goal: Goal direction
        weekly_rate_kg: Assumed pace, None when no estimate applies
    """

    weeks: int
    current_weight_kg: float
    target_weight_kg: float
    weight_goal: WeightGoal
    weekly_rate_kg: Optional[float] = None

    @property
    def has_estimate(self) -> bool:
        """Whether a meaningful projection exists."""
        return self.weekly_rate_kg is not None and self.weeks > 0

    def weight_delta_kg(self) -> float:
        """Signed weight change required (target - current)."""
        return self.target_weight_kg - self.current_weight_kg
