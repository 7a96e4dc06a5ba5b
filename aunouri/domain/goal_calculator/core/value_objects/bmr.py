"""BMR value object - Basal Metabolic Rate."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    The value is not required to be positive: Mifflin-St Jeor goes negative
    for extreme but valid inputs, and the calorie floor absorbs that.

    Attributes:
        value: BMR in kcal/day
    """

    value: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise ValueError(f"BMR must be finite, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
