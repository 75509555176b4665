"""MacroService - macronutrient allocation for a calorie target."""

from typing import Optional

from ...shared.rounding import round_half_up
from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macro_targets import (
    CARBS_KCAL_PER_GRAM,
    FAT_KCAL_PER_GRAM,
    PROTEIN_KCAL_PER_GRAM,
    MacroNutrient,
    MacroTargets,
)

# Protein grams per kg of lean mass (or body weight when unknown)
PROTEIN_G_PER_KG = 2.0
# Fat share of target calories, in percent
FAT_PERCENTAGE = 25


class MacroService(IMacroCalculator):
    """Allocate target calories across protein, fat and carbohydrates.

    Weight-loss strategy:
        - Protein: 2.0 g/kg of lean body mass, or of body weight when body
          fat is unknown (muscle preservation and satiety)
        - Fat: 25% of calories
        - Carbs: remaining calories, never below zero

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def calculate(
        self,
        target_calories: int,
        weight: float,
        lean_body_mass: Optional[float] = None,
    ) -> MacroTargets:
        """Calculate macro targets.

        Args:
            target_calories: Daily calorie target (positive)
            weight: Body weight in kg
            lean_body_mass: Lean body mass in kg, if known

        Returns:
            MacroTargets: Grams, calories and percentage per nutrient

        Example:
            >>> macros = MacroService().calculate(2207, 80.0)
            >>> macros.protein.grams, macros.fat.grams, macros.carbs.grams
            (160, 61, 254)
        """
        # 1. Protein from lean mass when available
        basis = lean_body_mass if lean_body_mass is not None else weight
        protein_g = round_half_up(basis * PROTEIN_G_PER_KG)
        protein_cal = protein_g * PROTEIN_KCAL_PER_GRAM

        # 2. Fat as fixed share of calories
        fat_cal = round_half_up(target_calories * FAT_PERCENTAGE / 100)
        fat_g = round_half_up(fat_cal / FAT_KCAL_PER_GRAM)

        # 3. Carbs take the remainder
        carb_cal = target_calories - protein_cal - fat_cal
        carb_g = round_half_up(carb_cal / CARBS_KCAL_PER_GRAM)

        return MacroTargets(
            protein=MacroNutrient(
                grams=protein_g,
                calories=protein_cal,
                percentage=round_half_up(protein_cal / target_calories * 100),
            ),
            fat=MacroNutrient(
                grams=fat_g,
                calories=fat_cal,
                percentage=FAT_PERCENTAGE,
            ),
            # Clamp for low targets with a large protein basis
            carbs=MacroNutrient(
                grams=max(carb_g, 0),
                calories=max(carb_cal, 0),
                percentage=max(round_half_up(carb_cal / target_calories * 100), 0),
            ),
        )
