"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR, BMRFormula
from ..core.value_objects.sex import Sex
from ..core.value_objects.user_inputs import UserInputs


def lean_body_mass(weight: float, body_fat_percentage: float) -> float:
    """Lean body mass in kg: total weight minus estimated fat mass."""
    return weight * (1 - body_fat_percentage / 100)


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate, choosing the equation from the inputs.

    When body fat percentage is known, Katch-McArdle is used since it
    works from lean mass and ignores sex, age and height:

        BMR = 370 + 21.6 × LBM(kg)

    Otherwise the Mifflin-St Jeor equation is applied:

        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, inputs: UserInputs) -> BMR:
        """Calculate BMR from validated inputs.

        Args:
            inputs: User biometric inputs (metric)

        Returns:
            BMR: Basal metabolic rate, formula tag and lean body mass

        Example:
            >>> service = BMRService()
            >>> bmr = service.calculate(UserInputs(
            ...     sex=Sex.MALE, age=30, height=180.0, weight=80.0,
            ...     activity_level=ActivityLevel.MODERATE,
            ... ))
            >>> bmr.value
            1780.0
        """
        if inputs.has_body_fat():
            lbm = lean_body_mass(inputs.weight, inputs.body_fat_percentage)
            return BMR(
                value=self.katch_mcardle(lbm),
                formula=BMRFormula.KATCH_MCARDLE,
                lean_body_mass=lbm,
            )

        return BMR(
            value=self.mifflin_st_jeor(
                weight=inputs.weight,
                height=inputs.height,
                age=inputs.age,
                sex=inputs.sex,
            ),
            formula=BMRFormula.MIFFLIN_ST_JEOR,
        )

    @staticmethod
    def mifflin_st_jeor(weight: float, height: float, age: int, sex: Sex) -> float:
        """Mifflin-St Jeor BMR in kcal/day."""
        # Base calculation (common for both sexes)
        base = 10 * weight + 6.25 * height - 5 * age

        # Sex-specific adjustment
        if sex == Sex.MALE:
            return base + 5
        return base - 161

    @staticmethod
    def katch_mcardle(lean_mass: float) -> float:
        """Katch-McArdle BMR in kcal/day."""
        return 370 + 21.6 * lean_mass
