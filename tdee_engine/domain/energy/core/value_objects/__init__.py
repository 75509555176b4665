"""Value objects for the energy domain."""

from .activity_level import (
    ACTIVITY_LEVEL_TABLE,
    ACTIVITY_LEVELS,
    DEFAULT_ACTIVITY_MULTIPLIER,
    ActivityLevel,
    ActivityLevelInfo,
)
from .bmr import BMR, BMRFormula
from .calculator_results import CalculatorResults
from .macro_targets import MacroNutrient, MacroTargets
from .sex import Sex, UnitSystem
from .tdee import TDEE, TDEEBreakdown
from .user_inputs import PartialUserInputs, UserInputs
from .weight_loss_target import WeightLossTarget

__all__ = [
    "ACTIVITY_LEVELS",
    "ACTIVITY_LEVEL_TABLE",
    "DEFAULT_ACTIVITY_MULTIPLIER",
    "ActivityLevel",
    "ActivityLevelInfo",
    "Sex",
    "UnitSystem",
    "UserInputs",
    "PartialUserInputs",
    "BMR",
    "BMRFormula",
    "TDEE",
    "TDEEBreakdown",
    "WeightLossTarget",
    "MacroNutrient",
    "MacroTargets",
    "CalculatorResults",
]
