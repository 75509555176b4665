"""Queries for the energy calculator."""

from .calculate_tdee import CalculateTDEEQuery, CalculateTDEEQueryHandler

__all__ = [
    "CalculateTDEEQuery",
    "CalculateTDEEQueryHandler",
]
