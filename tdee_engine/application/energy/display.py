"""Display helpers for calculator inputs."""

from tdee_engine.domain.energy.core.value_objects.activity_level import (
    ActivityLevel,
)
from tdee_engine.domain.energy.core.value_objects.sex import UnitSystem
from tdee_engine.domain.energy.core.value_objects.user_inputs import UserInputs
from tdee_engine.domain.energy.units.conversion import (
    cm_to_feet_inches,
    kg_to_lbs,
)
from tdee_engine.domain.shared.rounding import round_half_up

ACTIVITY_SHORT_LABELS = {
    ActivityLevel.SEDENTARY: "Sedentary",
    ActivityLevel.LIGHT: "Light",
    ActivityLevel.MODERATE: "Moderate",
    ActivityLevel.VERY_ACTIVE: "Very Active",
    ActivityLevel.EXTRA_ACTIVE: "Extra Active",
}


def format_inputs_summary(inputs: UserInputs) -> str:
    """One-line summary of inputs in the preferred unit system.

    Example:
        >>> format_inputs_summary(inputs)  # imperial, 180 cm, 80 kg
        'M, 30y, 5\\'11", 176 lbs, Moderate'
    """
    if inputs.unit_system == UnitSystem.IMPERIAL:
        feet, inches = cm_to_feet_inches(inputs.height)
        height = f"{feet}'{inches}\""
        weight = f"{round_half_up(kg_to_lbs(inputs.weight))} lbs"
    else:
        height = f"{round_half_up(inputs.height)} cm"
        weight = f"{round_half_up(inputs.weight)} kg"

    activity = ACTIVITY_SHORT_LABELS[inputs.activity_level]
    return f"{inputs.sex.short_code()}, {inputs.age}y, {height}, {weight}, {activity}"
