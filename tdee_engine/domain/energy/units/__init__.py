"""Unit conversion helpers."""

from .conversion import (
    FeetInches,
    cm_to_feet_inches,
    feet_inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
)

__all__ = [
    "FeetInches",
    "lbs_to_kg",
    "kg_to_lbs",
    "feet_inches_to_cm",
    "cm_to_feet_inches",
]
