"""MacroTargets value object - macronutrient allocation."""

from dataclasses import dataclass

PROTEIN_KCAL_PER_GRAM = 4
CARBS_KCAL_PER_GRAM = 4
FAT_KCAL_PER_GRAM = 9


@dataclass(frozen=True)
class MacroNutrient:
    """One macronutrient bucket.

    Attributes:
        grams: Daily amount in grams
        calories: Energy from this nutrient in kcal
        percentage: Share of the target calories (0-100)
    """

    grams: int
    calories: int
    percentage: int

    def __post_init__(self) -> None:
        if self.grams < 0:
            raise ValueError(f"Grams must be non-negative, got {self.grams}")


@dataclass(frozen=True)
class MacroTargets:
    """Daily protein / fat / carbohydrate targets.

    Carbohydrates absorb the rounding remainder, so the three calorie
    values add up to the target unless carbs had to be clamped at zero.
    """

    protein: MacroNutrient
    fat: MacroNutrient
    carbs: MacroNutrient

    def total_calories(self) -> int:
        """Sum of calories across the three buckets."""
        return self.protein.calories + self.fat.calories + self.carbs.calories

    def __str__(self) -> str:
        return f"{self.protein.grams}P / {self.carbs.grams}C / {self.fat.grams}F"
