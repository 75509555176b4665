"""Input validation for the energy calculator."""

from .input_validator import InputValidator

__all__ = ["InputValidator"]
