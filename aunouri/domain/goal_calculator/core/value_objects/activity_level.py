"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) used to scale BMR into TDEE.

    - SEDENTARY: Little or no exercise, desk job
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Very intense exercise, physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    def pal_multiplier(self) -> float:
        """Get PAL multiplier applied to BMR.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return _PAL_MULTIPLIERS[self]

    def description(self) -> str:
        """Get human-readable description shown during onboarding."""
        return _DESCRIPTIONS[self]


_PAL_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

_DESCRIPTIONS = {
    ActivityLevel.SEDENTARY: "Little or no exercise, desk job",
    ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
    ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
    ActivityLevel.ACTIVE: "Hard exercise 6-7 days/week",
    ActivityLevel.VERY_ACTIVE: "Very intense exercise, physical job",
}
