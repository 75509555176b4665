"""CalculatorResults value object - complete calculator output."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .bmr import BMRFormula
from .macro_targets import MacroTargets
from .tdee import TDEEBreakdown
from .weight_loss_target import WeightLossTarget


@dataclass(frozen=True)
class CalculatorResults:
    """Everything the calculator produces for one set of inputs.

    Built fresh on every calculation and never mutated. Callers keep it
    around for display and to recompute macros for another tier.

    Attributes:
        tdee: Rounded TDEE in kcal/day
        bmr: Rounded BMR in kcal/day
        breakdown: TDEE split into BMR / NEAT / TEF
        weight_loss_targets: Mild, moderate and aggressive tiers, in order
        macros: Macro targets for the recommended tier
        formula_used: BMR equation that was applied
        lean_body_mass: Lean body mass in kg (1 decimal), only when body
            fat percentage was supplied
    """

    tdee: int
    bmr: int
    breakdown: TDEEBreakdown
    weight_loss_targets: Tuple[WeightLossTarget, ...]
    macros: MacroTargets
    formula_used: BMRFormula
    lean_body_mass: Optional[float] = None

    def recommended_target(self) -> WeightLossTarget:
        """Get the recommended weight-loss tier.

        Raises:
            ValueError: If no tier is flagged as recommended
        """
        for target in self.weight_loss_targets:
            if target.is_recommended:
                return target
        raise ValueError("No recommended weight-loss target")
