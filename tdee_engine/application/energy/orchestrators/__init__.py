"""Orchestrators for the energy calculator."""

from .tdee_orchestrator import TDEEOrchestrator

__all__ = ["TDEEOrchestrator"]
