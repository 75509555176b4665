"""BreakdownService - split TDEE into BMR, NEAT and TEF."""

from ...shared.rounding import round_half_up
from ..core.ports.calculators import IBreakdownCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE, TDEEBreakdown

# Thermic effect of food as a share of TDEE
TEF_FRACTION = 0.10


class BreakdownService(IBreakdownCalculator):
    """Decompose TDEE into its three energy components.

    - BMR: resting energy
    - TEF: 10% of TDEE spent digesting food
    - NEAT: everything else, i.e. the activity component

    NEAT is derived from the rounded components so that
    bmr + neat + tef equals the rounded total exactly.
    """

    def calculate(self, bmr: BMR, tdee: TDEE) -> TDEEBreakdown:
        """Calculate the TDEE breakdown.

        Args:
            bmr: Basal metabolic rate
            tdee: Total daily energy expenditure

        Returns:
            TDEEBreakdown: Whole-calorie components

        Example:
            >>> BreakdownService().calculate(BMR(1780.0), TDEE(2759.0, 1.55))
            TDEEBreakdown(bmr=1780, neat=703, tef=276, total=2759)
        """
        total = round_half_up(tdee.value)
        resting = round_half_up(bmr.value)
        tef = round_half_up(tdee.value * TEF_FRACTION)

        return TDEEBreakdown(
            bmr=resting,
            neat=total - resting - tef,
            tef=tef,
            total=total,
        )
