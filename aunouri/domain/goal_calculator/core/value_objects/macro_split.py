"""MacroSplit value object - percentage allocation of calories."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroSplit:
    """Percentage of daily calories assigned to each macronutrient.

    Attributes:
        protein: Protein share in percent
        carbs: Carbohydrate share in percent
        fat: Fat share in percent
    """

    protein: int
    carbs: int
    fat: int

    def __post_init__(self) -> None:
        """Validate the split covers exactly 100% of calories.

        Raises:
            ValueError: If a share is negative or shares do not sum to 100
        """
        for name in ("protein", "carbs", "fat"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} share must be non-negative")
        if self.protein + self.carbs + self.fat != 100:
            raise ValueError(
                f"Macro split must sum to 100%, got "
                f"{self.protein}/{self.carbs}/{self.fat}"
            )

    def __str__(self) -> str:
        return f"{self.protein}P / {self.carbs}C / {self.fat}F (%)"
