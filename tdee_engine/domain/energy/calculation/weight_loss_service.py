"""WeightLossService - tiered calorie targets for weight loss."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ...shared.rounding import round_half_up
from ..core.ports.calculators import IWeightLossCalculator
from ..core.value_objects.tdee import TDEE
from ..core.value_objects.weight_loss_target import WeightLossTarget

# Absolute minimum daily intake, applied to every tier
MIN_SAFE_CALORIES = 1200


@dataclass(frozen=True)
class WeightLossTier:
    """Static definition of a weight-loss tier."""

    label: str
    deficit: float
    weekly_loss: float
    description: str
    is_recommended: bool = False
    warning: Optional[str] = None


WEIGHT_LOSS_TIERS: Tuple[WeightLossTier, ...] = (
    WeightLossTier(
        label="Mild Deficit",
        deficit=0.15,
        weekly_loss=0.25,
        description="Slow and sustainable. Easier to maintain, less muscle loss.",
    ),
    WeightLossTier(
        label="Moderate Deficit",
        deficit=0.20,
        weekly_loss=0.45,
        description="Optimal balance of results and sustainability.",
        is_recommended=True,
    ),
    WeightLossTier(
        label="Aggressive Deficit",
        deficit=0.25,
        weekly_loss=0.7,
        description="Faster results but harder to maintain.",
        warning=(
            "Recommended for short-term use only (4-8 weeks). Higher risk of "
            "muscle loss and metabolic adaptation."
        ),
    ),
)


class WeightLossService(IWeightLossCalculator):
    """Generate mild / moderate / aggressive calorie targets.

    Each tier applies a fixed deficit to TDEE:

        calories = max(round(TDEE × (1 - deficit)), 1200)

    The 1200 kcal floor always wins. When it does, ``deficit`` keeps its
    nominal value and ``effective_deficit`` reports what was really
    applied.
    """

    def calculate(self, tdee: TDEE) -> Tuple[WeightLossTarget, ...]:
        """Calculate weight-loss targets.

        Args:
            tdee: Total daily energy expenditure

        Returns:
            Tuple of 3 WeightLossTarget, ordered mild, moderate, aggressive

        Example:
            >>> targets = WeightLossService().calculate(TDEE(2759.0, 1.55))
            >>> [t.calories for t in targets]
            [2345, 2207, 2069]
        """
        return tuple(self._build_target(tier, tdee.value) for tier in WEIGHT_LOSS_TIERS)

    @staticmethod
    def _build_target(tier: WeightLossTier, tdee: float) -> WeightLossTarget:
        unclamped = round_half_up(tdee * (1 - tier.deficit))
        calories = max(unclamped, MIN_SAFE_CALORIES)

        return WeightLossTarget(
            label=tier.label,
            deficit=tier.deficit,
            calories=calories,
            weekly_loss=tier.weekly_loss,
            description=tier.description,
            is_recommended=tier.is_recommended,
            warning=tier.warning,
            effective_deficit=round(1 - calories / tdee, 4),
            is_clamped=calories > unclamped,
        )
