"""TDEEOrchestrator - coordinates calculation services."""

from typing import Optional

import structlog

from tdee_engine.domain.energy.calculation.bmr_service import (
    BMRService,
    lean_body_mass,
)
from tdee_engine.domain.energy.calculation.breakdown_service import (
    BreakdownService,
)
from tdee_engine.domain.energy.calculation.macro_service import MacroService
from tdee_engine.domain.energy.calculation.tdee_service import TDEEService
from tdee_engine.domain.energy.calculation.weight_loss_service import (
    WeightLossService,
)
from tdee_engine.domain.energy.core.ports.calculators import (
    IBMRCalculator,
    IBreakdownCalculator,
    IMacroCalculator,
    ITDEECalculator,
    IWeightLossCalculator,
)
from tdee_engine.domain.energy.core.value_objects.calculator_results import (
    CalculatorResults,
)
from tdee_engine.domain.energy.core.value_objects.macro_targets import (
    MacroTargets,
)
from tdee_engine.domain.energy.core.value_objects.user_inputs import UserInputs
from tdee_engine.domain.energy.core.value_objects.weight_loss_target import (
    WeightLossTarget,
)
from tdee_engine.domain.shared.rounding import round_half_up_tenths

logger = structlog.get_logger(__name__)


class TDEEOrchestrator:
    """
    Orchestrates calculation services into one calculator result.

    Flow:
    1. Calculate BMR (Katch-McArdle with body fat, else Mifflin-St Jeor)
    2. Calculate TDEE from BMR and activity level
    3. Split TDEE into BMR / NEAT / TEF
    4. Generate mild / moderate / aggressive weight-loss targets
    5. Allocate macros for the recommended target

    Inputs must already be validated; see CalculateTDEEQueryHandler for
    the validating entry point.
    """

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        breakdown_service: Optional[IBreakdownCalculator] = None,
        weight_loss_service: Optional[IWeightLossCalculator] = None,
        macro_service: Optional[IMacroCalculator] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._breakdown_service = breakdown_service or BreakdownService()
        self._weight_loss_service = weight_loss_service or WeightLossService()
        self._macro_service = macro_service or MacroService()

    def calculate(self, inputs: UserInputs) -> CalculatorResults:
        """
        Calculate TDEE, breakdown, weight-loss targets and macros.

        Args:
            inputs: Validated user inputs (metric)

        Returns:
            CalculatorResults with all computed metrics
        """
        # Step 1: BMR and formula selection
        bmr = self._bmr_service.calculate(inputs)
        logger.debug(
            "BMR calculated",
            formula=bmr.formula.value,
            bmr=bmr.value,
            lean_body_mass=bmr.lean_body_mass,
        )

        # Step 2: TDEE
        tdee = self._tdee_service.calculate(bmr, inputs.activity_level)

        # Step 3: Energy components
        breakdown = self._breakdown_service.calculate(bmr, tdee)

        # Step 4: Weight-loss tiers
        targets = self._weight_loss_service.calculate(tdee)
        recommended = next(t for t in targets if t.is_recommended)

        # Step 5: Macros for the recommended tier
        macros = self._macro_service.calculate(
            target_calories=recommended.calories,
            weight=inputs.weight,
            lean_body_mass=bmr.lean_body_mass,
        )

        rounded_lbm = None
        if bmr.lean_body_mass is not None:
            rounded_lbm = round_half_up_tenths(bmr.lean_body_mass)

        logger.debug(
            "TDEE calculated",
            tdee=breakdown.total,
            multiplier=tdee.multiplier,
            recommended_calories=recommended.calories,
        )

        return CalculatorResults(
            tdee=breakdown.total,
            bmr=breakdown.bmr,
            breakdown=breakdown,
            weight_loss_targets=targets,
            macros=macros,
            formula_used=bmr.formula,
            lean_body_mass=rounded_lbm,
        )

    def compute_macros(
        self,
        target_calories: int,
        weight: float,
        lean_body_mass: Optional[float] = None,
    ) -> MacroTargets:
        """
        Recompute macros for an arbitrary calorie target.

        Args:
            target_calories: Daily calorie target (positive)
            weight: Body weight in kg
            lean_body_mass: Lean body mass in kg, if known

        Returns:
            MacroTargets for the given target
        """
        return self._macro_service.calculate(
            target_calories=target_calories,
            weight=weight,
            lean_body_mass=lean_body_mass,
        )

    def macros_for_target(
        self,
        target: WeightLossTarget,
        inputs: UserInputs,
    ) -> MacroTargets:
        """
        Recompute macros when the user selects another weight-loss tier.

        Protein stays the same as for the recommended tier since it only
        depends on body composition.

        Args:
            target: Selected tier from CalculatorResults.weight_loss_targets
            inputs: Inputs the results were calculated from

        Returns:
            MacroTargets for the selected tier
        """
        lbm = None
        if inputs.has_body_fat():
            lbm = lean_body_mass(inputs.weight, inputs.body_fat_percentage)

        return self.compute_macros(
            target_calories=target.calories,
            weight=inputs.weight,
            lean_body_mass=lbm,
        )
