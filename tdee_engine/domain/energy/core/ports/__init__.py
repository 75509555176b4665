"""Ports for the energy domain."""

from .calculators import (
    IBMRCalculator,
    IBreakdownCalculator,
    IMacroCalculator,
    ITDEECalculator,
    IWeightLossCalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IBreakdownCalculator",
    "IWeightLossCalculator",
    "IMacroCalculator",
]
