"""Unit tests for CalculateTDEEQueryHandler."""

from unittest.mock import Mock

import pytest

from tdee_engine.application.energy.orchestrators.tdee_orchestrator import (
    TDEEOrchestrator,
)
from tdee_engine.application.energy.queries.calculate_tdee import (
    CalculateTDEEQuery,
    CalculateTDEEQueryHandler,
)
from tdee_engine.domain.energy.core.exceptions import InvalidUserInputsError
from tdee_engine.domain.energy.core.value_objects import PartialUserInputs


@pytest.fixture
def valid_candidate() -> PartialUserInputs:
    """Candidate inputs as a form would submit them."""
    return PartialUserInputs.from_mapping(
        {
            "sex": "male",
            "age": "30",
            "height": "180",
            "weight": "80",
            "activityLevel": "moderate",
        }
    )


def test_handle_valid_inputs(valid_candidate: PartialUserInputs) -> None:
    """Test results for valid candidate inputs."""
    handler = CalculateTDEEQueryHandler()

    results = handler.handle(CalculateTDEEQuery(inputs=valid_candidate))

    assert results.tdee == 2759
    assert results.recommended_target().calories == 2207


def test_invalid_age_skips_calculation(valid_candidate: PartialUserInputs) -> None:
    """Test age 10 raises and never reaches the orchestrator."""
    from dataclasses import replace

    orchestrator = Mock(spec=TDEEOrchestrator)
    handler = CalculateTDEEQueryHandler(orchestrator=orchestrator)

    with pytest.raises(InvalidUserInputsError) as exc_info:
        handler.handle(CalculateTDEEQuery(inputs=replace(valid_candidate, age=10)))

    assert exc_info.value.errors == ["Please enter a valid age between 15 and 100"]
    orchestrator.calculate.assert_not_called()


def test_all_errors_in_exception() -> None:
    """Test every failed check is carried by the exception."""
    handler = CalculateTDEEQueryHandler()

    with pytest.raises(InvalidUserInputsError) as exc_info:
        handler.handle(CalculateTDEEQuery(inputs=PartialUserInputs()))

    assert len(exc_info.value.errors) == 5
    assert "Please select your sex" in str(exc_info.value)
