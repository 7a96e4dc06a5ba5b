"""Ports for goal calculation."""

from .calculators import (
    IBMRCalculator,
    ICalorieGoalCalculator,
    IGoalEstimator,
    IMacroCalculator,
    ITDEECalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "ICalorieGoalCalculator",
    "IMacroCalculator",
    "IGoalEstimator",
]
