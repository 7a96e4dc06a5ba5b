"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.biometric_profile import BiometricProfile
from ..core.value_objects.bmr import BMR


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, profile: BiometricProfile) -> BMR:
        """Calculate BMR from biometric data.

        Args:
            profile: Validated biometric profile

        Returns:
            BMR: Basal metabolic rate in kcal/day (unrounded)

        Example:
            >>> profile = BiometricProfile(
            ...     age=30, height_cm=165.0, weight_kg=60.0,
            ...     biological_sex="female", activity_level="light",
            ...     weight_goal="maintain",
            ... )
            >>> BMRService().calculate(profile).value
            1320.25
        """
        base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
        return BMR(value=base + profile.biological_sex.bmr_constant())
