"""Unit tests for BMRService."""

import pytest

from tdee_engine.domain.energy.calculation.bmr_service import (
    BMRService,
    lean_body_mass,
)
from tdee_engine.domain.energy.core.value_objects import (
    ActivityLevel,
    BMRFormula,
    Sex,
    UserInputs,
)


def make_inputs(**overrides) -> UserInputs:
    values = dict(
        sex=Sex.MALE,
        age=30,
        height=180.0,
        weight=80.0,
        activity_level=ActivityLevel.MODERATE,
    )
    values.update(overrides)
    return UserInputs(**values)


class TestMifflinStJeor:
    """Test BMR without body fat (Mifflin-St Jeor)."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMRService()

    def test_calculate_bmr_male(self):
        """Test BMR calculation for male."""
        bmr = self.service.calculate(make_inputs())

        # Expected: 10*80 + 6.25*180 - 5*30 + 5 = 1780
        assert bmr.value == 1780.0
        assert bmr.formula == BMRFormula.MIFFLIN_ST_JEOR
        assert bmr.lean_body_mass is None

    def test_calculate_bmr_female(self):
        """Test BMR calculation for female."""
        bmr = self.service.calculate(
            make_inputs(sex=Sex.FEMALE, weight=60.0, height=165.0, age=25)
        )

        # Expected: 10*60 + 6.25*165 - 5*25 - 161 = 1345.25
        assert bmr.value == 1345.25

    def test_sex_difference_is_166(self):
        """Test male/female offset (+5 vs -161)."""
        male = self.service.calculate(make_inputs(sex=Sex.MALE))
        female = self.service.calculate(make_inputs(sex=Sex.FEMALE))

        assert male.value - female.value == 166.0

    def test_age_lowers_bmr(self):
        """Test that age affects BMR calculation."""
        young = self.service.calculate(make_inputs(age=25))
        old = self.service.calculate(make_inputs(age=50))

        assert young.value - old.value == 125.0  # 25 years * 5

    def test_zero_body_fat_uses_mifflin(self):
        """Test that 0% body fat is treated as not supplied."""
        bmr = self.service.calculate(make_inputs(body_fat_percentage=0.0))

        assert bmr.formula == BMRFormula.MIFFLIN_ST_JEOR
        assert bmr.value == 1780.0


class TestKatchMcArdle:
    """Test BMR with body fat (Katch-McArdle)."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMRService()

    def test_calculate_bmr_with_body_fat(self):
        """Test female 50 kg at 20% body fat."""
        bmr = self.service.calculate(
            make_inputs(sex=Sex.FEMALE, weight=50.0, body_fat_percentage=20.0)
        )

        # LBM = 50 * 0.8 = 40; BMR = 370 + 21.6*40 = 1234
        assert bmr.formula == BMRFormula.KATCH_MCARDLE
        assert bmr.lean_body_mass == pytest.approx(40.0)
        assert bmr.value == pytest.approx(1234.0)

    def test_sex_age_height_ignored(self):
        """Test that Katch-McArdle only depends on lean mass."""
        a = self.service.calculate(
            make_inputs(sex=Sex.MALE, age=20, height=190.0, body_fat_percentage=15.0)
        )
        b = self.service.calculate(
            make_inputs(sex=Sex.FEMALE, age=70, height=150.0, body_fat_percentage=15.0)
        )

        assert a.value == pytest.approx(b.value)

    def test_lean_body_mass(self):
        """Test lean body mass helper."""
        assert lean_body_mass(80.0, 25.0) == pytest.approx(60.0)
        assert lean_body_mass(72.5, 18.0) == pytest.approx(59.45)
