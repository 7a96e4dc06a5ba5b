"""BiometricProfile value object - calculator input."""

from dataclasses import dataclass
from typing import Any, Mapping

from .activity_level import ActivityLevel
from .biological_sex import BiologicalSex
from .validation import coerce_enum, require_positive_int, require_positive_number
from .weight_goal import WeightGoal

# Physiological ceilings; anything above is a data entry error
MAX_AGE_YEARS = 150
MAX_HEIGHT_CM = 300.0
MAX_WEIGHT_KG = 700.0


@dataclass(frozen=True)
class BiometricProfile:
    """User biometric and lifestyle data for one calculation.

    Enum fields accept either the enum member or its string value; all
    fields are normalized on construction.

    Attributes:
        age: Age in years (whole number, 1 to 150)
        height_cm: Height in centimeters (> 0, at most 300)
        weight_kg: Body weight in kilograms (> 0, at most 700)
        biological_sex: female or male
        activity_level: Physical activity level
        weight_goal: lose, maintain or gain

    Raises:
        InvalidInputError: If any field is missing or outside its domain
    """

    age: int
    height_cm: float
    weight_kg: float
    biological_sex: BiologicalSex
    activity_level: ActivityLevel
    weight_goal: WeightGoal

    def __post_init__(self) -> None:
        # frozen dataclass: normalized values go through object.__setattr__
        normalized = {
            "age": require_positive_int("age", self.age, MAX_AGE_YEARS),
            "height_cm": require_positive_number(
                "height_cm", self.height_cm, MAX_HEIGHT_CM
            ),
            "weight_kg": require_positive_number(
                "weight_kg", self.weight_kg, MAX_WEIGHT_KG
            ),
            "biological_sex": coerce_enum(
                BiologicalSex, "biological_sex", self.biological_sex
            ),
            "activity_level": coerce_enum(
                ActivityLevel, "activity_level", self.activity_level
            ),
            "weight_goal": coerce_enum(WeightGoal, "weight_goal", self.weight_goal),
        }
        for name, value in normalized.items():
            object.__setattr__(self, name, value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BiometricProfile":
        """Build a profile from onboarding answers.

        Missing keys are passed as None so they are reported as
        ``InvalidInputError`` rather than ``TypeError``.
        """
        return cls(
            age=data.get("age"),  # type: ignore[arg-type]
            height_cm=data.get("height_cm"),  # type: ignore[arg-type]
            weight_kg=data.get("weight_kg"),  # type: ignore[arg-type]
            biological_sex=data.get("biological_sex"),  # type: ignore[arg-type]
            activity_level=data.get("activity_level"),  # type: ignore[arg-type]
            weight_goal=data.get("weight_goal"),  # type: ignore[arg-type]
        )
