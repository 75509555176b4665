"""Calculator ports - interfaces for BMR/TDEE/breakdown/target/macro calculations."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmr import BMR
from ..value_objects.macro_targets import MacroTargets
from ..value_objects.tdee import TDEE, TDEEBreakdown
from ..value_objects.user_inputs import UserInputs
from ..value_objects.weight_loss_target import WeightLossTarget


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Selects Katch-McArdle or Mifflin-St Jeor depending on body fat.
    """

    @abstractmethod
    def calculate(self, inputs: UserInputs) -> BMR:
        """Calculate BMR from validated inputs.

        Args:
            inputs: User biometric inputs

        Returns:
            BMR: Basal metabolic rate with the formula used
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: Union[ActivityLevel, str]) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass


class IBreakdownCalculator(ABC):
    """Port for splitting TDEE into BMR / NEAT / TEF."""

    @abstractmethod
    def calculate(self, bmr: BMR, tdee: TDEE) -> TDEEBreakdown:
        """Decompose TDEE into its energy components."""
        pass


class IWeightLossCalculator(ABC):
    """Port for weight-loss tier generation."""

    @abstractmethod
    def calculate(self, tdee: TDEE) -> Tuple[WeightLossTarget, ...]:
        """Generate the ordered weight-loss tiers for a TDEE."""
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient allocation."""

    @abstractmethod
    def calculate(
        self,
        target_calories: int,
        weight: float,
        lean_body_mass: Optional[float] = None,
    ) -> MacroTargets:
        """Allocate target calories across protein, fat and carbs.

        Args:
            target_calories: Daily calorie target (positive)
            weight: Body weight in kg
            lean_body_mass: Lean body mass in kg, if known

        Returns:
            MacroTargets: Grams, calories and percentage per nutrient
        """
        pass
