"""Value objects for goal calculation."""

from .activity_level import ActivityLevel
from .biological_sex import BiologicalSex
from .biometric_profile import BiometricProfile
from .bmr import BMR
from .goal_estimate import GoalEstimate
from .macro_split import MacroSplit
from .macro_targets import MacroTargets
from .tdee import TDEE
from .weight_goal import WeightGoal

__all__ = [
    "ActivityLevel",
    "BiologicalSex",
    "BiometricProfile",
    "BMR",
    "TDEE",
    "WeightGoal",
    "MacroSplit",
    "MacroTargets",
    "GoalEstimate",
]
