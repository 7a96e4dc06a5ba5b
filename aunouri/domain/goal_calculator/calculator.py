"""Module-level entry points for goal calculation.

Thin functional wrappers around the calculation services for callers that
do not need to inject their own calculators (onboarding, profile updates).
"""

from typing import Any, Mapping, Union

from .calculation.bmr_service import BMRService
from .calculation.calorie_goal_service import CalorieGoalService
from .calculation.goal_estimate_service import GoalEstimateService
from .calculation.macro_service import MacroService
from .calculation.tdee_service import TDEEService
from .core.value_objects.activity_level import ActivityLevel
from .core.value_objects.biometric_profile import BiometricProfile
from .core.value_objects.macro_split import MacroSplit
from .core.value_objects.macro_targets import MacroTargets
from .core.value_objects.validation import coerce_enum
from .core.value_objects.weight_goal import WeightGoal

ProfileInput = Union[BiometricProfile, Mapping[str, Any]]

_bmr_service = BMRService()
_tdee_service = TDEEService()
_calorie_goal_service = CalorieGoalService(_bmr_service, _tdee_service)
_macro_service = MacroService()
_goal_estimate_service = GoalEstimateService()


def _as_profile(profile: ProfileInput) -> BiometricProfile:
    if isinstance(profile, BiometricProfile):
        return profile
    return BiometricProfile.from_mapping(profile)


def calculate_bmr(profile: ProfileInput) -> float:
    """Basal metabolic rate in kcal/day (unrounded)."""
    return _bmr_service.calculate(_as_profile(profile)).value


def calculate_tdee(profile: ProfileInput) -> int:
    """Maintenance calories in kcal/day."""
    validated = _as_profile(profile)
    bmr = _bmr_service.calculate(validated)
    return _tdee_service.calculate(bmr, validated.activity_level).value


def calculate_calorie_goal(profile: ProfileInput) -> int:
    """Daily calorie goal, never below the safety floor."""
    return _calorie_goal_service.calculate(_as_profile(profile))


def get_macro_split(
    weight_goal: Union[WeightGoal, str], is_diabetic: bool = False
) -> MacroSplit:
    """Percentage split used for a goal."""
    return _macro_service.get_split(weight_goal, is_diabetic)


def calculate_macro_targets(
    calorie_goal: float,
    weight_goal: Union[WeightGoal, str],
    is_diabetic: bool = False,
) -> MacroTargets:
    """Macro targets in grams for a calorie goal."""
    return _macro_service.calculate(calorie_goal, weight_goal, is_diabetic)


def estimate_weeks_to_goal(
    current_weight: float,
    target_weight: float,
    weight_goal: Union[WeightGoal, str],
) -> int:
    """Whole weeks to reach target weight, 0 when no estimate applies."""
    return _goal_estimate_service.estimate_weeks(current_weight, target_weight, weight_goal)


def get_activity_description(activity_level: Union[ActivityLevel, str]) -> str:
    """Human-readable description of an activity level."""
    return coerce_enum(ActivityLevel, "activity_level", activity_level).description()
