"""MacroService - macronutrient targets from a calorie goal."""

from types import MappingProxyType
from typing import Mapping, Union

from ..core.exceptions.domain_errors import InvalidInputError
from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macro_split import MacroSplit
from ..core.value_objects.macro_targets import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroTargets,
)
from ..core.value_objects.validation import coerce_enum, require_positive_number
from ..core.value_objects.weight_goal import WeightGoal
from .rounding import round_half_up

STANDARD_SPLITS: Mapping[WeightGoal, MacroSplit] = MappingProxyType(
    {
        WeightGoal.LOSE: MacroSplit(protein=35, carbs=35, fat=30),
        WeightGoal.MAINTAIN: MacroSplit(protein=30, carbs=40, fat=30),
        WeightGoal.GAIN: MacroSplit(protein=25, carbs=50, fat=25),
    }
)

# Lower carbohydrate share for blood sugar management
DIABETIC_SPLITS: Mapping[WeightGoal, MacroSplit] = MappingProxyType(
    {
        WeightGoal.LOSE: MacroSplit(protein=35, carbs=30, fat=35),
        WeightGoal.MAINTAIN: MacroSplit(protein=30, carbs=35, fat=35),
        WeightGoal.GAIN: MacroSplit(protein=30, carbs=35, fat=35),
    }
)


# Well above any goal a valid profile can produce
MAX_CALORIE_GOAL = 25000.0


class MacroService(IMacroCalculator):
    """Split a daily calorie goal into protein, carbohydrate and fat grams.

    Percentage splits by goal (protein / carbs / fat):

    Standard:
        - Lose: 35 / 35 / 30 (higher protein for muscle retention)
        - Maintain: 30 / 40 / 30 (balanced)
        - Gain: 25 / 50 / 25 (more carbs for training energy)

    Diabetic:
        - Lose: 35 / 30 / 35
        - Maintain: 30 / 35 / 35
        - Gain: 30 / 35 / 35

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def get_split(
        self, weight_goal: Union[WeightGoal, str], is_diabetic: bool = False
    ) -> MacroSplit:
        """Get the percentage split for a goal.

        Raises:
            InvalidInputError: If the goal is not recognized
        """
        goal = coerce_enum(WeightGoal, "weight_goal", weight_goal)
        table = DIABETIC_SPLITS if is_diabetic else STANDARD_SPLITS
        return table[goal]

    def calculate(
        self,
        calorie_goal: float,
        weight_goal: Union[WeightGoal, str],
        is_diabetic: bool = False,
    ) -> MacroTargets:
        """Calculate macro targets in grams.

        Args:
            calorie_goal: Daily calorie goal (kcal, > 0, at most 25000)
            weight_goal: lose, maintain or gain
            is_diabetic: Use the lower-carbohydrate split

        Returns:
            MacroTargets: Each macro rounded to the nearest gram

        Raises:
            InvalidInputError: If calorie goal or weight goal is invalid

        Example:
            >>> targets = MacroService().calculate(2000, WeightGoal.LOSE)
            >>> (targets.protein_g, targets.carbs_g, targets.fat_g)
            (175, 175, 67)
        """
        calories = require_positive_number(
            "calorie_goal", calorie_goal, MAX_CALORIE_GOAL
        )
        if not isinstance(is_diabetic, bool):
            raise InvalidInputError("is_diabetic", is_diabetic, "must be a boolean")
        split = self.get_split(weight_goal, is_diabetic)

        return MacroTargets(
            calories=round_half_up(calories),
            protein_g=round_half_up(calories * split.protein / 100 / PROTEIN_KCAL_PER_G),
            carbs_g=round_half_up(calories * split.carbs / 100 / CARBS_KCAL_PER_G),
            fat_g=round_half_up(calories * split.fat / 100 / FAT_KCAL_PER_G),
        )
