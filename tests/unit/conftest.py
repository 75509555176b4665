"""Shared fixtures for unit tests."""

import pytest
import structlog

from tdee_engine.domain.energy.core.value_objects import (
    ActivityLevel,
    Sex,
    UnitSystem,
    UserInputs,
)


@pytest.fixture
def male_inputs() -> UserInputs:
    """Male, 30y, 180 cm, 80 kg, moderate activity, no body fat."""
    return UserInputs(
        sex=Sex.MALE,
        age=30,
        height=180.0,
        weight=80.0,
        activity_level=ActivityLevel.MODERATE,
        unit_system=UnitSystem.IMPERIAL,
    )


@pytest.fixture
def female_body_fat_inputs() -> UserInputs:
    """Female, 50 kg with 20% body fat (lean mass 40 kg)."""
    return UserInputs(
        sex=Sex.FEMALE,
        age=28,
        height=160.0,
        weight=50.0,
        activity_level=ActivityLevel.LIGHT,
        body_fat_percentage=20.0,
        unit_system=UnitSystem.METRIC,
    )


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore default structlog configuration after each test."""
    yield
    structlog.reset_defaults()
