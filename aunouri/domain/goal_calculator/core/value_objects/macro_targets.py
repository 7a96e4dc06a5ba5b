"""MacroTargets value object - daily calorie and macronutrient targets."""

from dataclasses import dataclass

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


@dataclass(frozen=True)
class MacroTargets:
    """Daily calorie goal with macronutrient targets in grams.

    Uses standard conversion: protein 4 kcal/g, carbs 4 kcal/g, fat 9 kcal/g.
    Each macro is rounded independently, so ``total_calories()`` may differ
    slightly from ``calories``.

    Attributes:
        calories: Daily calorie goal (kcal)
        protein_g: Protein in grams
        carbs_g: Carbohydrates in grams
        fat_g: Fat in grams
    """

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int

    def __post_init__(self) -> None:
        """Validate all targets are non-negative.

        Raises:
            ValueError: If any target is negative
        """
        for name in ("calories", "protein_g", "carbs_g", "fat_g"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def total_calories(self) -> int:
        """Calories implied by the gram targets.

        Example:
            >>> MacroTargets(calories=2000, protein_g=175, carbs_g=175, fat_g=67).total_calories()
            2003
        """
        return (
            self.protein_g * PROTEIN_KCAL_PER_G
            + self.carbs_g * CARBS_KCAL_PER_G
            + self.fat_g * FAT_KCAL_PER_G
        )

    def protein_percentage(self) -> float:
        """Protein share of implied calories (0-100)."""
        return self._percentage(self.protein_g * PROTEIN_KCAL_PER_G)

    def carbs_percentage(self) -> float:
        """Carbohydrate share of implied calories (0-100)."""
        return self._percentage(self.carbs_g * CARBS_KCAL_PER_G)

    def fat_percentage(self) -> float:
        """Fat share of implied calories (0-100)."""
        return self._percentage(self.fat_g * FAT_KCAL_PER_G)

    def _percentage(self, kcal: int) -> float:
        total = self.total_calories()
        if total == 0:
            return 0.0
        return kcal / total * 100

    def __str__(self) -> str:
        return (
            f"{self.calories} kcal: "
            f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"
        )
