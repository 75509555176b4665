"""Sex and UnitSystem value objects."""

from enum import Enum


class Sex(str, Enum):
    """Biological sex used by the Mifflin-St Jeor equation."""

    MALE = "male"
    FEMALE = "female"

    def short_code(self) -> str:
        """Get one-letter code ('M' or 'F')."""
        return "M" if self is Sex.MALE else "F"


class UnitSystem(str, Enum):
    """Preferred unit system for input and display.

    Never affects the canonical metric values handed to the engine.
    """

    METRIC = "metric"
    IMPERIAL = "imperial"
