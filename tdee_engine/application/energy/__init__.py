"""Use cases for the energy calculator."""

from .display import format_inputs_summary
from .orchestrators import TDEEOrchestrator
from .queries import CalculateTDEEQuery, CalculateTDEEQueryHandler

__all__ = [
    "TDEEOrchestrator",
    "CalculateTDEEQuery",
    "CalculateTDEEQueryHandler",
    "format_inputs_summary",
]
