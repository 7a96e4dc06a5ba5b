"""Goal calculator domain.

Pure, synchronous computation of energy and macronutrient targets and
time-to-goal projections from biometric input.
"""

from .calculator import (
    calculate_bmr,
    calculate_calorie_goal,
    calculate_macro_targets,
    calculate_tdee,
    estimate_weeks_to_goal,
    get_activity_description,
    get_macro_split,
)

__all__ = [
    "calculate_bmr",
    "calculate_tdee",
    "calculate_calorie_goal",
    "calculate_macro_targets",
    "estimate_weeks_to_goal",
    "get_macro_split",
    "get_activity_description",
]
