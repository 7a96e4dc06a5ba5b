"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure (maintenance calories) in kcal/day.

    Calculated as round(BMR × PAL), so it is always a whole number.

    Attributes:
        value: TDEE in kcal/day
    """

    value: int

    def __str__(self) -> str:
        return f"{self.value} kcal/day"
