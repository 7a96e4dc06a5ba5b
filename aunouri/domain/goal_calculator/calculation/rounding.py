"""Rounding helpers for nutrition figures."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``); nutrition
    targets round ``.5`` up so results do not flip between neighbouring inputs.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)
