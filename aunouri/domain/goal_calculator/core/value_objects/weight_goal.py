"""WeightGoal value object - user's weight objective."""

from enum import Enum
from typing import Optional


class WeightGoal(str, Enum):
    """Weight goal determining the calorie offset and pace of change.

    - LOSE: ~500 kcal/day deficit, about 0.5 kg/week
    - MAINTAIN: eat at TDEE
    - GAIN: ~300 kcal/day surplus, about 0.3 kg/week
    """

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"

    def calorie_adjustment(self) -> int:
        """Daily calorie offset applied to TDEE.

        Example:
            >>> WeightGoal.LOSE.calorie_adjustment()
            -500
        """
        return _CALORIE_ADJUSTMENTS[self]

    def weekly_rate_kg(self) -> Optional[float]:
        """Expected weight change per week in kg, None for maintain."""
        return _WEEKLY_RATES_KG.get(self)

    def direction(self) -> int:
        """Sign of the expected weight delta: -1 lose, 0 maintain, +1 gain."""
        return _DIRECTIONS[self]


_CALORIE_ADJUSTMENTS = {
    WeightGoal.LOSE: -500,
    WeightGoal.MAINTAIN: 0,
    WeightGoal.GAIN: 300,
}

_WEEKLY_RATES_KG = {
    WeightGoal.LOSE: 0.5,
    WeightGoal.GAIN: 0.3,
}

_DIRECTIONS = {
    WeightGoal.LOSE: -1,
    WeightGoal.MAINTAIN: 0,
    WeightGoal.GAIN: 1,
}
