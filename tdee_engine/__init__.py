"""TDEE engine: energy expenditure, weight-loss targets and macros.

Functional entry points for the calculator UI:

    >>> results = calculate_tdee(inputs)
    >>> compute_macros(results.weight_loss_targets[0].calories, inputs.weight)
"""

from typing import Any, List, Mapping, Optional, Union

from tdee_engine.application.energy import (
    CalculateTDEEQuery,
    CalculateTDEEQueryHandler,
    TDEEOrchestrator,
    format_inputs_summary,
)
from tdee_engine.domain.energy.core.exceptions import (
    EnergyDomainError,
    InvalidUserInputsError,
)
from tdee_engine.domain.energy.core.value_objects import (
    ACTIVITY_LEVELS,
    ActivityLevel,
    ActivityLevelInfo,
    BMRFormula,
    CalculatorResults,
    MacroNutrient,
    MacroTargets,
    PartialUserInputs,
    Sex,
    TDEEBreakdown,
    UnitSystem,
    UserInputs,
    WeightLossTarget,
)
from tdee_engine.domain.energy.units import (
    FeetInches,
    cm_to_feet_inches,
    feet_inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
)
from tdee_engine.domain.energy.validation import InputValidator

__version__ = "1.0.0"

_orchestrator = TDEEOrchestrator()
_validator = InputValidator()


def calculate_tdee(inputs: UserInputs) -> CalculatorResults:
    """Calculate results for validated inputs."""
    return _orchestrator.calculate(inputs)


def compute_macros(
    target_calories: int,
    weight: float,
    lean_body_mass: Optional[float] = None,
) -> MacroTargets:
    """Recompute macros for a reselected weight-loss tier."""
    return _orchestrator.compute_macros(target_calories, weight, lean_body_mass)


def validate_inputs(
    candidate: Union[PartialUserInputs, UserInputs, Mapping[str, Any]],
) -> List[str]:
    """Validate candidate inputs; an empty list means valid."""
    return _validator.validate(candidate)


__all__ = [
    "calculate_tdee",
    "compute_macros",
    "validate_inputs",
    "format_inputs_summary",
    "lbs_to_kg",
    "kg_to_lbs",
    "feet_inches_to_cm",
    "cm_to_feet_inches",
    "FeetInches",
    "ACTIVITY_LEVELS",
    "ActivityLevel",
    "ActivityLevelInfo",
    "BMRFormula",
    "CalculatorResults",
    "MacroNutrient",
    "MacroTargets",
    "PartialUserInputs",
    "Sex",
    "TDEEBreakdown",
    "UnitSystem",
    "UserInputs",
    "WeightLossTarget",
    "TDEEOrchestrator",
    "CalculateTDEEQuery",
    "CalculateTDEEQueryHandler",
    "InputValidator",
    "EnergyDomainError",
    "InvalidUserInputsError",
]
