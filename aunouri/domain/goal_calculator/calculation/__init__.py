"""Calculation services for goal calculation."""

from .bmr_service import BMRService
from .calorie_goal_service import MIN_SAFE_CALORIES, CalorieGoalService
from .goal_estimate_service import GoalEstimateService
from .macro_service import DIABETIC_SPLITS, STANDARD_SPLITS, MacroService
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "CalorieGoalService",
    "MacroService",
    "GoalEstimateService",
    "MIN_SAFE_CALORIES",
    "STANDARD_SPLITS",
    "DIABETIC_SPLITS",
]
