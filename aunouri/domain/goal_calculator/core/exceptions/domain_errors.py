"""Domain exceptions for goal calculation."""


class GoalCalculatorError(Exception):
    """Base exception for goal calculator domain errors."""

    pass


class InvalidInputError(GoalCalculatorError, ValueError):
    """Raised when biometric or goal input is outside the accepted domain.

    Attributes:
        field: Name of the offending input field
        value: Rejected value
    """

    def __init__(self, field: str, value: object, reason: str):
        super().__init__(f"Invalid {field}: {reason} (got {value!r})")
        self.field = field
        self.value = value
        self.reason = reason


ValidationError = InvalidInputError
