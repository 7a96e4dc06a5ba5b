"""Calculator ports - interfaces for the goal calculation services."""

from abc import ABC, abstractmethod

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.biometric_profile import BiometricProfile
from ..value_objects.bmr import BMR
from ..value_objects.goal_estimate import GoalEstimate
from ..value_objects.macro_targets import MacroTargets
from ..value_objects.tdee import TDEE
from ..value_objects.weight_goal import WeightGoal


class IBMRCalculator(ABC):
    """Port for Basal Metabolic Rate calculation."""

    @abstractmethod
    def calculate(self, profile: BiometricProfile) -> BMR:
        """Calculate BMR from biometric data."""
        pass


class ITDEECalculator(ABC):
    """Port for Total Daily Energy Expenditure calculation."""

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level."""
        pass


class ICalorieGoalCalculator(ABC):
    """Port for daily calorie goal calculation."""

    @abstractmethod
    def calculate(self, profile: BiometricProfile) -> int:
        """Calculate the daily calorie goal (kcal) for a profile."""
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient target calculation."""

    @abstractmethod
    def calculate(
        self,
        calorie_goal: float,
        weight_goal: WeightGoal,
        is_diabetic: bool = False,
    ) -> MacroTargets:
        """Split a calorie goal into protein/carbs/fat grams."""
        pass


class IGoalEstimator(ABC):
    """Port for time-to-goal projection."""

    @abstractmethod
    def estimate(
        self,
        current_weight: float,
        target_weight: float,
        weight_goal: WeightGoal,
    ) -> GoalEstimate:
        """Project weeks needed to move from current to target weight."""
        pass
