"""InputValidator - range checks on candidate calculator inputs."""

from typing import Any, List, Mapping, Optional, Union

import structlog

from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.sex import Sex
from ..core.value_objects.user_inputs import PartialUserInputs, UserInputs

logger = structlog.get_logger(__name__)

AGE_RANGE = (15, 100)
HEIGHT_RANGE_CM = (100.0, 250.0)
WEIGHT_RANGE_KG = (30.0, 300.0)
BODY_FAT_RANGE = (3.0, 60.0)

SEX_MESSAGE = "Please select your sex"
AGE_MESSAGE = "Please enter a valid age between 15 and 100"
HEIGHT_MESSAGE = "Please enter a valid height"
WEIGHT_MESSAGE = "Please enter a valid weight"
ACTIVITY_MESSAGE = "Please select your activity level"
BODY_FAT_MESSAGE = "Body fat percentage must be between 3% and 60%"

Candidate = Union[PartialUserInputs, UserInputs, Mapping[str, Any]]


class InputValidator:
    """Validate candidate inputs before any calculation runs.

    Every check runs, in a fixed order, and each failing check adds one
    message. An empty list means the inputs are valid.
    """

    def validate(self, candidate: Candidate) -> List[str]:
        """Validate candidate inputs.

        Args:
            candidate: PartialUserInputs, UserInputs or a raw mapping of
                form values

        Returns:
            List[str]: Human-readable error messages, empty when valid

        Example:
            >>> InputValidator().validate(PartialUserInputs(age=10))
            ['Please select your sex', 'Please enter a valid age between 15 and 100', ...]
        """
        if isinstance(candidate, Mapping):
            candidate = PartialUserInputs.from_mapping(candidate)

        errors: List[str] = []

        if not _is_member(Sex, candidate.sex):
            errors.append(SEX_MESSAGE)

        if not _in_range(candidate.age, AGE_RANGE) or not _is_whole(candidate.age):
            errors.append(AGE_MESSAGE)

        if not _in_range(candidate.height, HEIGHT_RANGE_CM):
            errors.append(HEIGHT_MESSAGE)

        if not _in_range(candidate.weight, WEIGHT_RANGE_KG):
            errors.append(WEIGHT_MESSAGE)

        if not _is_member(ActivityLevel, candidate.activity_level):
            errors.append(ACTIVITY_MESSAGE)

        if candidate.body_fat_percentage is not None and not _in_range(
            candidate.body_fat_percentage, BODY_FAT_RANGE
        ):
            errors.append(BODY_FAT_MESSAGE)

        if errors:
            logger.info("Inputs rejected", error_count=len(errors))
        return errors


def _in_range(value: Optional[float], bounds: tuple) -> bool:
    if value is None:
        return False
    low, high = bounds
    return low <= value <= high


def _is_whole(value: float) -> bool:
    return float(value).is_integer()


def _is_member(enum_cls: Any, value: Any) -> bool:
    if value is None:
        return False
    try:
        enum_cls(value)
    except ValueError:
        return False
    return True
