"""Calculation services for the energy domain."""

from .bmr_service import BMRService, lean_body_mass
from .breakdown_service import BreakdownService
from .macro_service import MacroService
from .tdee_service import TDEEService, activity_multiplier
from .weight_loss_service import MIN_SAFE_CALORIES, WEIGHT_LOSS_TIERS, WeightLossService

__all__ = [
    "BMRService",
    "TDEEService",
    "BreakdownService",
    "WeightLossService",
    "MacroService",
    "lean_body_mass",
    "activity_multiplier",
    "MIN_SAFE_CALORIES",
    "WEIGHT_LOSS_TIERS",
]
