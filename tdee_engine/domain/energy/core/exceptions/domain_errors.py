"""Domain exceptions for the energy calculator."""

from typing import List


class EnergyDomainError(Exception):
    """Base exception for energy domain errors."""

    pass


class InvalidUserInputsError(EnergyDomainError):
    """Raised when candidate inputs fail validation.

    Carries every failed check so the caller can show them as one list.
    """

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors) or "Invalid user inputs")
        self.errors = list(errors)
