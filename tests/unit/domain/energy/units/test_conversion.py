"""Unit tests for unit conversion helpers."""

import pytest

from tdee_engine.domain.energy.units.conversion import (
    FeetInches,
    cm_to_feet_inches,
    feet_inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
)


class TestWeightConversion:
    """Test pounds / kilograms conversion."""

    def test_lbs_to_kg(self):
        """Test 100 lbs."""
        assert lbs_to_kg(100) == pytest.approx(45.3592)

    def test_kg_to_lbs(self):
        """Test 80 kg."""
        assert kg_to_lbs(80) == pytest.approx(176.37, abs=0.01)

    @pytest.mark.parametrize("lbs", [66.0, 150.5, 176.0, 661.0])
    def test_round_trip(self, lbs):
        """Test kg_to_lbs(lbs_to_kg(x)) == x."""
        assert kg_to_lbs(lbs_to_kg(lbs)) == pytest.approx(lbs)


class TestHeightConversion:
    """Test feet-inches / centimeters conversion."""

    def test_feet_inches_to_cm(self):
        """Test 5'11"."""
        assert feet_inches_to_cm(5, 11) == pytest.approx(180.34)

    def test_cm_to_feet_inches(self):
        """Test 180 cm is 5'11"."""
        assert cm_to_feet_inches(180.0) == FeetInches(feet=5, inches=11)

    def test_inches_carry_into_feet(self):
        """Test 182.8 cm (71.97 in) becomes 6'0" rather than 5'12"."""
        assert cm_to_feet_inches(182.8) == FeetInches(feet=6, inches=0)

    @pytest.mark.parametrize("cm", [100.0, 152.4, 167.3, 180.0, 199.9, 250.0])
    def test_round_trip_within_one_inch(self, cm):
        """Test conversion back to cm is within 2.54 cm."""
        feet, inches = cm_to_feet_inches(cm)

        assert abs(feet_inches_to_cm(feet, inches) - cm) <= 2.54
        assert 0 <= inches < 12
