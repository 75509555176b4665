"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BMRFormula(str, Enum):
    """Equation used to estimate BMR."""

    MIFFLIN_ST_JEOR = "mifflin-st-jeor"
    KATCH_MCARDLE = "katch-mcardle"


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the minimum calories needed for basic bodily functions
    at rest, together with the equation that produced it.

    Attributes:
        value: BMR in kcal/day (must be positive)
        formula: Equation used for the estimate
        lean_body_mass: Lean body mass in kg, only for Katch-McArdle
    """

    value: float
    formula: BMRFormula = BMRFormula.MIFFLIN_ST_JEOR
    lean_body_mass: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate BMR is positive.

        Raises:
            ValueError: If BMR is not positive
        """
        if self.value <= 0:
            raise ValueError(f"BMR must be positive, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
