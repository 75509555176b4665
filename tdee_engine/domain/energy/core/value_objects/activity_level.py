"""ActivityLevel value object - physical activity level for TDEE."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

# Multiplier applied when an activity level is not in the table.
DEFAULT_ACTIVITY_MULTIPLIER = 1.2


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) used to scale BMR into TDEE.

    - SEDENTARY: Little or no exercise, desk job
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - VERY_ACTIVE: Hard exercise 6-7 days/week
    - EXTRA_ACTIVE: Very hard exercise & physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    def pal_multiplier(self) -> float:
        """Get PAL multiplier from the reference table.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return ACTIVITY_LEVEL_TABLE[self].multiplier

    def info(self) -> "ActivityLevelInfo":
        """Get the reference table entry for this level."""
        return ACTIVITY_LEVEL_TABLE[self]


@dataclass(frozen=True)
class ActivityLevelInfo:
    """Reference data for one activity level.

    Attributes:
        value: Activity level this entry describes
        label: Short human-readable name
        multiplier: PAL multiplier (1.2-1.9)
        description: One-line description of the lifestyle
        examples: Typical lifestyles matching the level
    """

    value: ActivityLevel
    label: str
    multiplier: float
    description: str
    examples: Tuple[str, ...] = ()


ACTIVITY_LEVELS: Tuple[ActivityLevelInfo, ...] = (
    ActivityLevelInfo(
        value=ActivityLevel.SEDENTARY,
        label="Sedentary",
        multiplier=1.2,
        description="Little or no exercise, desk job",
        examples=(
            "Office work with minimal walking",
            "Mostly sitting throughout the day",
        ),
    ),
    ActivityLevelInfo(
        value=ActivityLevel.LIGHT,
        label="Lightly Active",
        multiplier=1.375,
        description="Light exercise 1-3 days/week",
        examples=("Walking 30 min/day", "1-3 gym sessions per week"),
    ),
    ActivityLevelInfo(
        value=ActivityLevel.MODERATE,
        label="Moderately Active",
        multiplier=1.55,
        description="Moderate exercise 3-5 days/week",
        examples=(
            "Regular gym-goer",
            "Active job with some physical activity",
        ),
    ),
    ActivityLevelInfo(
        value=ActivityLevel.VERY_ACTIVE,
        label="Very Active",
        multiplier=1.725,
        description="Hard exercise 6-7 days/week",
        examples=("Daily intense workouts", "Training for competition"),
    ),
    ActivityLevelInfo(
        value=ActivityLevel.EXTRA_ACTIVE,
        label="Extra Active",
        multiplier=1.9,
        description="Very hard exercise & physical job",
        examples=(
            "Professional athlete",
            "Physical labor job + daily training",
        ),
    ),
)

ACTIVITY_LEVEL_TABLE: Mapping[ActivityLevel, ActivityLevelInfo] = MappingProxyType(
    {info.value: info for info in ACTIVITY_LEVELS}
)
