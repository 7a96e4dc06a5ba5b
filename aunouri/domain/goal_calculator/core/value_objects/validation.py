"""Input coercion helpers shared by goal calculator value objects."""

import math
from enum import Enum
from typing import Optional, Type, TypeVar

from ..exceptions.domain_errors import InvalidInputError

TEnum = TypeVar("TEnum", bound=Enum)


def require_positive_number(
    field: str, value: object, maximum: Optional[float] = None
) -> float:
    """Return ``value`` as float if it is a finite number greater than zero.

    Args:
        field: Name reported in the error
        value: Raw input
        maximum: Inclusive upper bound, if any

    Raises:
        InvalidInputError: If value is missing, not numeric, not finite,
            not strictly positive or above ``maximum``
    """
    if value is None:
        raise InvalidInputError(field, value, "value is required")
    # bool is an int subclass but never a meaningful measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidInputError(field, value, "must be finite")
    if value <= 0:
        raise InvalidInputError(field, value, "must be positive")
    if maximum is not None and value > maximum:
        raise InvalidInputError(field, value, f"must be at most {maximum:g}")
    return float(value)


def require_positive_int(
    field: str, value: object, maximum: Optional[int] = None
) -> int:
    """Return ``value`` as int if it is a whole number greater than zero.

    Integral floats such as ``30.0`` are accepted.

    Raises:
        InvalidInputError: If value is missing, fractional, not positive
            or above ``maximum``
    """
    number = require_positive_number(field, value, maximum)
    if not number.is_integer():
        raise InvalidInputError(field, value, "must be a whole number")
    return int(number)


def coerce_enum(enum_cls: Type[TEnum], field: str, value: object) -> TEnum:
    """Return the ``enum_cls`` member for ``value`` (member or raw value).

    Raises:
        InvalidInputError: If value is missing or not a recognized member
    """
    if value is None:
        raise InvalidInputError(field, value, "value is required")
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value.lower() if isinstance(value, str) else value)
    except ValueError:
        allowed = ", ".join(str(member.value) for member in enum_cls)
        raise InvalidInputError(field, value, f"expected one of: {allowed}") from None
