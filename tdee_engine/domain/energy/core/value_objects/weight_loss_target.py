"""WeightLossTarget value object - one calorie deficit tier."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WeightLossTarget:
    """Daily calorie target for one weight-loss tier.

    Attributes:
        label: Tier name ("Mild Deficit", ...)
        deficit: Nominal fraction below TDEE (0.15, 0.20, 0.25)
        calories: Daily target in kcal, never below the safety floor
        weekly_loss: Expected loss in kg/week
        description: Short explanation of the tier
        is_recommended: True only for the moderate tier
        warning: Caution text, only set on the aggressive tier
        effective_deficit: Fraction below TDEE actually applied once the
            safety floor is taken into account
        is_clamped: True when the safety floor overrode the nominal deficit
    """

    label: str
    deficit: float
    calories: int
    weekly_loss: float
    description: str
    is_recommended: bool = False
    warning: Optional[str] = None
    effective_deficit: float = 0.0
    is_clamped: bool = False

    def deficit_percentage(self) -> int:
        """Nominal deficit as a whole percentage (e.g. 20)."""
        return int(round(self.deficit * 100))
