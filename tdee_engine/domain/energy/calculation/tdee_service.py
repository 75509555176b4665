"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Union

import structlog

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import (
    ACTIVITY_LEVEL_TABLE,
    DEFAULT_ACTIVITY_MULTIPLIER,
    ActivityLevel,
)
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE

logger = structlog.get_logger(__name__)


def activity_multiplier(activity_level: Union[ActivityLevel, str]) -> float:
    """Look up the PAL multiplier for an activity level.

    Unknown levels fall back to the sedentary multiplier (1.2). Validation
    rejects them long before this point; the fallback only keeps a
    degenerate call from failing.
    """
    try:
        level = ActivityLevel(activity_level)
    except ValueError:
        logger.warning(
            "Unknown activity level, using default multiplier",
            activity_level=activity_level,
            multiplier=DEFAULT_ACTIVITY_MULTIPLIER,
        )
        return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_LEVEL_TABLE[level].multiplier


class TDEEService(ITDEECalculator):
    """Scale BMR by the activity multiplier from ACTIVITY_LEVELS.

    TDEE = BMR × multiplier, where the multiplier ranges from 1.2
    (sedentary) to 1.9 (extra active). The multiplier is kept on the
    returned TDEE so callers can show which factor was used.

    An activity level missing from the table is not an error here: it
    gets the sedentary 1.2 and a warning is logged. InputValidator is
    what keeps such values out.
    """

    def calculate(self, bmr: BMR, activity_level: Union[ActivityLevel, str]) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Total daily energy expenditure in kcal/day

        Example:
            >>> service = TDEEService()
            >>> tdee = service.calculate(BMR(value=1780.0), ActivityLevel.MODERATE)
            >>> tdee.value
            2759.0  # 1780 × 1.55
        """
        multiplier = activity_multiplier(activity_level)
        return TDEE(value=bmr.value * multiplier, multiplier=multiplier)
