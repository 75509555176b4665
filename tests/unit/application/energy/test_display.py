"""Unit tests for display helpers."""

from dataclasses import replace

from tdee_engine.application.energy.display import format_inputs_summary
from tdee_engine.domain.energy.core.value_objects import UnitSystem


def test_imperial_summary(male_inputs) -> None:
    """Test feet/inches and pounds formatting."""
    # 180 cm = 70.87 in = 5'11"; 80 kg = 176.4 lbs
    assert format_inputs_summary(male_inputs) == "M, 30y, 5'11\", 176 lbs, Moderate"


def test_metric_summary(female_body_fat_inputs) -> None:
    """Test centimeter and kilogram formatting."""
    assert format_inputs_summary(female_body_fat_inputs) == "F, 28y, 160 cm, 50 kg, Light"


def test_metric_rounding(male_inputs) -> None:
    """Test metric values round to whole units."""
    inputs = replace(
        male_inputs, unit_system=UnitSystem.METRIC, height=172.6, weight=68.4
    )

    assert format_inputs_summary(inputs) == "M, 30y, 173 cm, 68 kg, Moderate"
