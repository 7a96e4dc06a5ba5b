"""TDEEService - Total Daily Energy Expenditure calculation."""

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE
from .rounding import round_half_up


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = round(BMR × PAL)

    PAL Multipliers:
        - Sedentary: 1.2
        - Light: 1.375
        - Moderate: 1.55
        - Active: 1.725
        - Very Active: 1.9
    """

    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Example:
            >>> TDEEService().calculate(BMR(value=1780.0), ActivityLevel.MODERATE).value
            2759
        """
        return TDEE(value=round_half_up(bmr.value * activity_level.pal_multiplier()))
