"""CalorieGoalService - daily calorie goal from biometrics and goal."""

from typing import Optional

from ..core.ports.calculators import (
    IBMRCalculator,
    ICalorieGoalCalculator,
    ITDEECalculator,
)
from ..core.value_objects.biometric_profile import BiometricProfile
from ..core.value_objects.tdee import TDEE
from ..core.value_objects.weight_goal import WeightGoal
from .bmr_service import BMRService
from .rounding import round_half_up
from .tdee_service import TDEEService

MIN_SAFE_CALORIES = 1200


class CalorieGoalService(ICalorieGoalCalculator):
    """Calculate the daily calorie goal.

    Flow:
    1. BMR (Mifflin-St Jeor)
    2. TDEE = round(BMR × PAL)
    3. Apply the weight goal offset (-500 lose, 0 maintain, +300 gain)
    4. Clamp to ``MIN_SAFE_CALORIES`` so no unsafe deficit is prescribed

    The clamp is silent: it is a safety floor, not an input error.
    """

    def __init__(
        self,
        bmr_calculator: Optional[IBMRCalculator] = None,
        tdee_calculator: Optional[ITDEECalculator] = None,
        min_calories: int = MIN_SAFE_CALORIES,
    ):
        self._bmr_calculator = bmr_calculator or BMRService()
        self._tdee_calculator = tdee_calculator or TDEEService()
        self._min_calories = min_calories

    @property
    def min_calories(self) -> int:
        """Calorie floor applied to every goal."""
        return self._min_calories

    def unclamped_goal(self, tdee: TDEE, weight_goal: WeightGoal) -> int:
        """TDEE plus the weight goal offset, before the safety floor."""
        return round_half_up(tdee.value + weight_goal.calorie_adjustment())

    def apply_floor(self, goal: int) -> int:
        """Raise a goal to the calorie floor if it falls below it."""
        return max(self._min_calories, goal)

    def calculate(self, profile: BiometricProfile) -> int:
        """Calculate daily calorie goal in kcal.

        Example:
            >>> profile = BiometricProfile(
            ...     age=30, height_cm=180.0, weight_kg=80.0,
            ...     biological_sex="male", activity_level="moderate",
            ...     weight_goal="lose",
            ... )
            >>> CalorieGoalService().calculate(profile)
            2259
        """
        bmr = self._bmr_calculator.calculate(profile)
        tdee = self._tdee_calculator.calculate(bmr, profile.activity_level)
        return self.apply_floor(self.unclamped_goal(tdee, profile.weight_goal))
