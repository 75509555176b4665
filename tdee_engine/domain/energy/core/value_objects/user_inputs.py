"""UserInputs value objects - biometric inputs for the calculator."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .activity_level import ActivityLevel
from .sex import Sex, UnitSystem

# Form field aliases accepted by PartialUserInputs.from_mapping
_FIELD_ALIASES = {
    "sex": "sex",
    "age": "age",
    "height": "height",
    "weight": "weight",
    "activity_level": "activity_level",
    "activityLevel": "activity_level",
    "body_fat_percentage": "body_fat_percentage",
    "bodyFatPercentage": "body_fat_percentage",
    "unit_system": "unit_system",
    "unitSystem": "unit_system",
}


@dataclass(frozen=True)
class UserInputs:
    """Validated biometric inputs, always in metric units.

    Attributes:
        sex: Biological sex
        age: Age in years (15-100)
        height: Height in centimeters (100-250 cm)
        weight: Body weight in kilograms (30-300 kg)
        activity_level: Physical activity level
        body_fat_percentage: Optional body fat percentage (3-60)
        unit_system: Preferred display units; does not affect calculation
    """

    sex: Sex
    age: int
    height: float
    weight: float
    activity_level: ActivityLevel
    body_fat_percentage: Optional[float] = None
    unit_system: UnitSystem = UnitSystem.IMPERIAL

    def has_body_fat(self) -> bool:
        """Check whether a usable body fat percentage was supplied."""
        return self.body_fat_percentage is not None and self.body_fat_percentage > 0


@dataclass(frozen=True)
class PartialUserInputs:
    """Candidate inputs as received from a form, every field optional.

    Numeric fields are parsed on construction; blank or unparsable values
    become None. Enum fields hold the raw value when it is not a
    recognised member, so the validator can report it instead of failing
    at parse time.
    """

    sex: Optional[Union[Sex, str]] = None
    age: Optional[float] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    activity_level: Optional[Union[ActivityLevel, str]] = None
    body_fat_percentage: Optional[float] = None
    unit_system: Optional[Union[UnitSystem, str]] = None

    def __post_init__(self) -> None:
        """Parse raw form values into numbers and enum members."""
        for name in ("age", "height", "weight", "body_fat_percentage"):
            object.__setattr__(self, name, _to_number(getattr(self, name)))
        object.__setattr__(self, "sex", _to_enum(Sex, self.sex))
        object.__setattr__(
            self, "activity_level", _to_enum(ActivityLevel, self.activity_level)
        )
        object.__setattr__(self, "unit_system", _to_enum(UnitSystem, self.unit_system))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PartialUserInputs":
        """Build candidate inputs from a plain mapping.

        Accepts snake_case or camelCase keys. Numeric strings are parsed;
        blank or unparsable numbers are treated as missing.

        Args:
            data: Raw form values

        Returns:
            PartialUserInputs: Candidate inputs

        Example:
            >>> PartialUserInputs.from_mapping({"age": "30", "activityLevel": "light"})
            PartialUserInputs(sex=None, age=30.0, ...)
        """
        fields = {}
        for key, value in data.items():
            name = _FIELD_ALIASES.get(key)
            if name is not None:
                fields[name] = value

        return cls(**fields)

    def to_user_inputs(self) -> UserInputs:
        """Convert a valid candidate into UserInputs.

        Returns:
            UserInputs: Validated inputs

        Raises:
            InvalidUserInputsError: If any validation check fails. Ages
                must be whole numbers.
        """
        # Import here to avoid circular dependency
        from ...validation.input_validator import InputValidator
        from ..exceptions.domain_errors import InvalidUserInputsError

        errors = InputValidator().validate(self)
        if errors:
            raise InvalidUserInputsError(errors)

        unit_system = self.unit_system if isinstance(self.unit_system, UnitSystem) else None
        return UserInputs(
            sex=Sex(self.sex),
            age=int(self.age),
            height=float(self.height),
            weight=float(self.weight),
            activity_level=ActivityLevel(self.activity_level),
            body_fat_percentage=self.body_fat_percentage,
            unit_system=unit_system or UnitSystem.IMPERIAL,
        )


def _to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _to_enum(enum_cls: Any, value: Any) -> Any:
    if value is None or value == "":
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return value
