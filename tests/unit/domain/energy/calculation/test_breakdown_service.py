"""Unit tests for BreakdownService."""

import pytest

from tdee_engine.domain.energy.calculation.breakdown_service import (
    BreakdownService,
)
from tdee_engine.domain.energy.calculation.tdee_service import TDEEService
from tdee_engine.domain.energy.core.value_objects import (
    BMR,
    TDEE,
    ActivityLevel,
    TDEEBreakdown,
)


class TestBreakdownService:
    """Test TDEE decomposition into BMR / NEAT / TEF."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BreakdownService()

    def test_reference_breakdown(self):
        """Test 1780 BMR at moderate activity."""
        breakdown = self.service.calculate(BMR(1780.0), TDEE(1780.0 * 1.55, 1.55))

        # TEF = round(275.9) = 276; NEAT = 2759 - 1780 - 276 = 703
        assert breakdown == TDEEBreakdown(bmr=1780, neat=703, tef=276, total=2759)

    def test_tef_is_ten_percent(self):
        """Test TEF rounding."""
        breakdown = self.service.calculate(BMR(1500.0), TDEE(2062.5, 1.375))

        # 206.25 -> 206
        assert breakdown.tef == 206
        assert breakdown.total == 2063  # 2062.5 rounds half up

    @pytest.mark.parametrize("bmr_value", [1000.3, 1234.5, 1345.25, 1780.0, 2468.9])
    @pytest.mark.parametrize("level", list(ActivityLevel))
    def test_components_sum_to_total(self, bmr_value, level):
        """Test bmr + neat + tef == total for every computed breakdown."""
        bmr = BMR(bmr_value)
        tdee = TDEEService().calculate(bmr, level)

        breakdown = self.service.calculate(bmr, tdee)

        assert breakdown.bmr + breakdown.neat + breakdown.tef == breakdown.total

    def test_negative_neat_not_clamped(self):
        """Test pathological multiplier below 1 surfaces as negative NEAT."""
        breakdown = self.service.calculate(BMR(2000.0), TDEE(1800.0, 0.9))

        # TEF = 180; NEAT = 1800 - 2000 - 180 = -380
        assert breakdown.neat == -380
        assert breakdown.bmr + breakdown.neat + breakdown.tef == breakdown.total
