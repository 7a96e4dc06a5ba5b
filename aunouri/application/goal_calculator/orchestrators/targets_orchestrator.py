"""NutritionTargetsOrchestrator - coordinates goal calculation services."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import structlog

from aunouri.domain.goal_calculator.calculation.bmr_service import BMRService
from aunouri.domain.goal_calculator.calculation.calorie_goal_service import (
    CalorieGoalService,
)
from aunouri.domain.goal_calculator.calculation.goal_estimate_service import (
    GoalEstimateService,
)
from aunouri.domain.goal_calculator.calculation.macro_service import MacroService
from aunouri.domain.goal_calculator.calculation.tdee_service import TDEEService
from aunouri.domain.goal_calculator.core.value_objects.biometric_profile import (
    BiometricProfile,
)
from aunouri.domain.goal_calculator.core.value_objects.bmr import BMR
from aunouri.domain.goal_calculator.core.value_objects.goal_estimate import (
    GoalEstimate,
)
from aunouri.domain.goal_calculator.core.value_objects.macro_targets import (
    MacroTargets,
)
from aunouri.domain.goal_calculator.core.value_objects.tdee import TDEE

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class NutritionTargets:
    """Result of goal calculations for one profile."""

    profile: BiometricProfile
    bmr: BMR
    tdee: TDEE
    calorie_goal: int
    macros: MacroTargets
    is_diabetic: bool = False
    goal_estimate: Optional[GoalEstimate] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for storing on the user profile."""
        return {
            "bmr": round(self.bmr.value),
            "tdee": self.tdee.value,
            "calorie_goal": self.calorie_goal,
            "protein_g": self.macros.protein_g,
            "carbs_g": self.macros.carbs_g,
            "fat_g": self.macros.fat_g,
            "is_diabetic": self.is_diabetic,
            "weight_goal": self.profile.weight_goal.value,
            "weeks_to_goal": (
                self.goal_estimate.weeks if self.goal_estimate is not None else None
            ),
            "target_weight_kg": (
                self.goal_estimate.target_weight_kg
                if self.goal_estimate is not None
                else None
            ),
        }


class NutritionTargetsOrchestrator:
    """
    Orchestrates calculation services into the targets stored on a profile.

    Flow:
    1. BMR from biometric data
    2. TDEE from BMR and activity level
    3. Calorie goal (goal offset, safety floor)
    4. Macro targets from the calorie goal
    5. Optional weeks-to-goal projection when a target weight is given
    """

    def __init__(
        self,
        bmr_service: Optional[BMRService] = None,
        tdee_service: Optional[TDEEService] = None,
        macro_service: Optional[MacroService] = None,
        goal_estimate_service: Optional[GoalEstimateService] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._calorie_goal_service = CalorieGoalService(
            self._bmr_service, self._tdee_service
        )
        self._macro_service = macro_service or MacroService()
        self._goal_estimate_service = goal_estimate_service or GoalEstimateService()

    def calculate_targets(
        self,
        profile: Union[BiometricProfile, Mapping[str, Any]],
        target_weight_kg: Optional[float] = None,
        is_diabetic: bool = False,
    ) -> NutritionTargets:
        """
        Calculate complete nutrition targets.

        Args:
            profile: Biometric profile or raw onboarding answers
            target_weight_kg: Desired weight for the time-to-goal projection
            is_diabetic: Use the lower-carbohydrate macro split

        Returns:
            NutritionTargets with all computed values

        Raises:
            InvalidInputError: If any input is outside its domain
        """
        if not isinstance(profile, BiometricProfile):
            profile = BiometricProfile.from_mapping(profile)

        bmr = self._bmr_service.calculate(profile)
        tdee = self._tdee_service.calculate(bmr, profile.activity_level)
        unclamped = self._calorie_goal_service.unclamped_goal(
            tdee, profile.weight_goal
        )
        calorie_goal = self._calorie_goal_service.apply_floor(unclamped)
        if calorie_goal != unclamped:
            logger.info(
                "Calorie goal clamped to safety floor",
                tdee=tdee.value,
                unclamped=unclamped,
                weight_goal=profile.weight_goal.value,
                floor=calorie_goal,
            )

        macros = self._macro_service.calculate(
            calorie_goal, profile.weight_goal, is_diabetic
        )

        goal_estimate = None
        if target_weight_kg is not None:
            goal_estimate = self._goal_estimate_service.estimate(
                profile.weight_kg, target_weight_kg, profile.weight_goal
            )

        return NutritionTargets(
            profile=profile,
            bmr=bmr,
            tdee=tdee,
            calorie_goal=calorie_goal,
            macros=macros,
            is_diabetic=is_diabetic,
            goal_estimate=goal_estimate,
        )
