"""BiologicalSex value object."""

from enum import Enum


class BiologicalSex(str, Enum):
    """Biological sex selecting the Mifflin-St Jeor constant."""

    FEMALE = "female"
    MALE = "male"

    def bmr_constant(self) -> float:
        """Sex-specific constant added to the Mifflin-St Jeor base.

        Example:
            >>> BiologicalSex.FEMALE.bmr_constant()
            -161.0
        """
        return 5.0 if self is BiologicalSex.MALE else -161.0
