"""Unit tests for GoalEstimateService."""

import pytest

from aunouri.domain.goal_calculator.calculation.goal_estimate_service import (
    GoalEstimateService,
)
from aunouri.domain.goal_calculator.core.exceptions import InvalidInputError
from aunouri.domain.goal_calculator.core.value_objects import WeightGoal


@pytest.fixture
def service():
    return GoalEstimateService()


class TestEstimateWeeks:
    """Test weeks-to-goal projection."""

    def test_lose_ten_kg(self, service):
        """Test 10 kg at 0.5 kg/week is 20 weeks."""
        assert service.estimate_weeks(80, 70, "lose") == 20

    def test_same_weight_is_zero(self, service):
        """Test no estimate when already at target."""
        assert service.estimate_weeks(70, 70, "lose") == 0

    def test_inconsistent_direction_is_zero(self, service):
        """Test losing toward a higher target has no estimate."""
        assert service.estimate_weeks(70, 75, "lose") == 0
        assert service.estimate_weeks(75, 70, "gain") == 0

    def test_maintain_is_zero(self, service):
        """Test maintain never projects."""
        assert service.estimate_weeks(80, 70, WeightGoal.MAINTAIN) == 0

    def test_gain_exact_quotient(self, service):
        """Test 3 kg at 0.3 kg/week is exactly 10 weeks."""
        assert service.estimate_weeks(70, 73, "gain") == 10

    def test_rounds_up_partial_week(self, service):
        """Test partial weeks round up."""
        assert service.estimate_weeks(80, 70.2, "lose") == 20
        assert service.estimate_weeks(70, 70.1, "gain") == 1
        assert service.estimate_weeks(80, 79.9, "lose") == 1

    @pytest.mark.parametrize(
        "current,target", [(0, 70), (80, 0), (-80, 70), (None, 70)]
    )
    def test_invalid_weights_rejected(self, service, current, target):
        """Test non-positive or missing weights."""
        with pytest.raises(InvalidInputError):
            service.estimate_weeks(current, target, "lose")

    @pytest.mark.parametrize(
        "current,target,field",
        [
            (1.0, 1e308, "target_weight"),
            (1e308, 70, "current_weight"),
            (80, 700.5, "target_weight"),
        ],
    )
    def test_oversized_weights_rejected(self, service, current, target, field):
        """Test huge finite weights fail validation instead of overflowing."""
        with pytest.raises(InvalidInputError, match="at most") as exc_info:
            service.estimate_weeks(current, target, "gain")

        assert exc_info.value.field == field

    def test_unknown_goal_rejected(self, service):
        """Test unrecognized goal."""
        with pytest.raises(InvalidInputError):
            service.estimate_weeks(80, 70, "shred")


class TestEstimate:
    """Test full GoalEstimate result."""

    def test_estimate_carries_rate(self, service):
        """Test populated estimate fields."""
        estimate = service.estimate(80, 70, "lose")

        assert estimate.weeks == 20
        assert estimate.weekly_rate_kg == 0.5
        assert estimate.weight_goal is WeightGoal.LOSE
        assert estimate.has_estimate is True

    def test_no_estimate_has_no_rate(self, service):
        """Test empty estimate for inconsistent direction."""
        estimate = service.estimate(70, 75, "lose")

        assert estimate.weeks == 0
        assert estimate.weekly_rate_kg is None
        assert estimate.has_estimate is False
