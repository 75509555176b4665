"""Unit conversion helpers between imperial and metric."""

import math
from typing import NamedTuple

KG_PER_LB = 0.453592
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12


class FeetInches(NamedTuple):
    """Height split into whole feet and rounded inches."""

    feet: int
    inches: int


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs * KG_PER_LB


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg / KG_PER_LB


def feet_inches_to_cm(feet: float, inches: float) -> float:
    """Convert a feet + inches height to centimeters.

    Example:
        >>> feet_inches_to_cm(5, 11)
        180.34
    """
    return (feet * INCHES_PER_FOOT + inches) * CM_PER_INCH


def cm_to_feet_inches(cm: float) -> FeetInches:
    """Convert centimeters to whole feet and rounded inches.

    Inches that round up to 12 carry into the next foot, so 182.8 cm is
    6'0" rather than 5'12".
    """
    total_inches = int(math.floor(cm / CM_PER_INCH + 0.5))
    feet, inches = divmod(total_inches, INCHES_PER_FOOT)
    return FeetInches(feet=feet, inches=inches)
