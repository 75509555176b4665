"""Rounding helpers for calorie and gram outputs."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from minus infinity.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``),
    which makes a 0.5 kcal boundary flip depending on parity. Calorie and
    gram outputs always round halves up instead.

    Example:
        >>> round_half_up(2206.5)
        2207
        >>> round_half_up(-0.5)
        0
    """
    return int(math.floor(value + 0.5))


def round_half_up_tenths(value: float) -> float:
    """Round to one decimal place, halves up.

    Example:
        >>> round_half_up_tenths(40.25)
        40.3
    """
    return round_half_up(value * 10) / 10
