"""Domain exceptions for goal calculation."""

from .domain_errors import GoalCalculatorError, InvalidInputError, ValidationError

__all__ = [
    "GoalCalculatorError",
    "InvalidInputError",
    "ValidationError",
]
