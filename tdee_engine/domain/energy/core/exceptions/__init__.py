"""Domain exceptions for the energy calculator."""

from .domain_errors import EnergyDomainError, InvalidUserInputsError

__all__ = [
    "EnergyDomainError",
    "InvalidUserInputsError",
]
