"""TDEE value objects - Total Daily Energy Expenditure and its breakdown."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × PAL (Physical Activity Level)

    Attributes:
        value: TDEE in kcal/day (must be positive)
        multiplier: PAL multiplier that was applied to BMR
    """

    value: float
    multiplier: float

    def __post_init__(self) -> None:
        """Validate TDEE is positive.

        Raises:
            ValueError: If TDEE is not positive
        """
        if self.value <= 0:
            raise ValueError(f"TDEE must be positive, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"


@dataclass(frozen=True)
class TDEEBreakdown:
    """TDEE split into its three energy components, in whole kcal/day.

    Attributes:
        bmr: Resting energy (basal metabolic rate)
        neat: Activity energy, whatever TDEE is left after BMR and TEF.
            Not clamped, so a corrupted BMR or multiplier shows up as
            a negative value.
        tef: Thermic effect of food (10% of TDEE)
        total: Rounded TDEE, always equal to bmr + neat + tef
    """

    bmr: int
    neat: int
    tef: int
    total: int
