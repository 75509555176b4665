"""CalculateTDEEQuery - validate candidate inputs and run the calculator."""

from dataclasses import dataclass
from typing import Optional

import structlog

from tdee_engine.application.energy.orchestrators.tdee_orchestrator import (
    TDEEOrchestrator,
)
from tdee_engine.domain.energy.core.exceptions.domain_errors import (
    InvalidUserInputsError,
)
from tdee_engine.domain.energy.core.value_objects.calculator_results import (
    CalculatorResults,
)
from tdee_engine.domain.energy.core.value_objects.user_inputs import (
    PartialUserInputs,
)
from tdee_engine.domain.energy.validation.input_validator import InputValidator

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CalculateTDEEQuery:
    """Query to calculate results from candidate inputs.

    Attributes:
        inputs: Candidate inputs as received from the form
    """

    inputs: PartialUserInputs


class CalculateTDEEQueryHandler:
    """Handler for CalculateTDEE queries.

    Validation always runs first; the orchestrator is never invoked for
    rejected inputs.
    """

    def __init__(
        self,
        orchestrator: Optional[TDEEOrchestrator] = None,
        validator: Optional[InputValidator] = None,
    ):
        self._orchestrator = orchestrator or TDEEOrchestrator()
        self._validator = validator or InputValidator()

    def handle(self, query: CalculateTDEEQuery) -> CalculatorResults:
        """
        Handle calculate TDEE query.

        Args:
            query: CalculateTDEEQuery with candidate inputs

        Returns:
            CalculatorResults for the validated inputs

        Raises:
            InvalidUserInputsError: If any validation check fails
        """
        errors = self._validator.validate(query.inputs)
        if errors:
            raise InvalidUserInputsError(errors)

        inputs = query.inputs.to_user_inputs()
        results = self._orchestrator.calculate(inputs)

        logger.info(
            "Calculation completed",
            formula=results.formula_used.value,
            tdee=results.tdee,
        )
        return results
