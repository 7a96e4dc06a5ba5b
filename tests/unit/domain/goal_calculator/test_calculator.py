"""Unit tests for module-level goal calculator functions."""

import pytest

from aunouri.domain.goal_calculator import (
    calculate_bmr,
    calculate_calorie_goal,
    calculate_macro_targets,
    calculate_tdee,
    estimate_weeks_to_goal,
    get_activity_description,
    get_macro_split,
)
from aunouri.domain.goal_calculator.core.exceptions import InvalidInputError

ONBOARDING_ANSWERS = {
    "age": 30,
    "height_cm": 180,
    "weight_kg": 80,
    "biological_sex": "male",
    "activity_level": "moderate",
    "weight_goal": "lose",
}


class TestCalculatorFunctions:
    """Test functional entry points accept raw onboarding answers."""

    def test_pipeline_from_mapping(self):
        """Test BMR, TDEE and goal from a plain dict."""
        assert calculate_bmr(ONBOARDING_ANSWERS) == 1780.0
        assert calculate_tdee(ONBOARDING_ANSWERS) == 2759
        assert calculate_calorie_goal(ONBOARDING_ANSWERS) == 2259

    def test_macro_targets(self):
        """Test macro targets for the computed goal."""
        targets = calculate_macro_targets(2259, "lose")

        assert targets.calories == 2259
        assert abs(targets.total_calories() - 2259) <= 2259 * 0.01

    def test_macro_split(self):
        """Test split lookup."""
        assert get_macro_split("maintain").carbs == 40
        assert get_macro_split("maintain", is_diabetic=True).carbs == 35

    def test_estimate_weeks(self):
        """Test weeks to goal."""
        assert estimate_weeks_to_goal(80, 70, "lose") == 20
        assert estimate_weeks_to_goal(70, 75, "lose") == 0

    def test_activity_description(self):
        """Test description lookup by raw value."""
        assert get_activity_description("light") == "Light exercise 1-3 days/week"

    def test_missing_field_is_validation_error(self):
        """Test missing answer is reported, not a crash."""
        answers = dict(ONBOARDING_ANSWERS)
        del answers["age"]

        with pytest.raises(InvalidInputError) as exc_info:
            calculate_calorie_goal(answers)

        assert exc_info.value.field == "age"

    def test_unknown_activity_rejected(self):
        """Test unknown activity level."""
        with pytest.raises(InvalidInputError):
            get_activity_description("couch")

    @pytest.mark.parametrize("weight", [1.7e307, 1e308])
    def test_oversized_weight_is_validation_error(self, weight):
        """Test huge finite weight is rejected before any arithmetic."""
        answers = dict(ONBOARDING_ANSWERS, weight_kg=weight)

        with pytest.raises(InvalidInputError) as exc_info:
            calculate_calorie_goal(answers)

        assert exc_info.value.field == "weight_kg"

    def test_oversized_inputs_to_macros_and_estimate(self):
        """Test direct entry points reject huge finite numbers."""
        with pytest.raises(InvalidInputError):
            calculate_macro_targets(1e307, "lose")
        with pytest.raises(InvalidInputError):
            estimate_weeks_to_goal(1.0, 1e308, "gain")
