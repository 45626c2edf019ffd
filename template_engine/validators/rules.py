"""
Rule Primitives

Stateless field checks shared by all validators. Each check appends at most
one ValidationError to the collector and returns whether the value passed.

Version: 1.0.0
"""

from typing import Any, Iterable, Optional, Union

from ..constants import (
    ERROR_REQUIRED,
    ERROR_MIN_LENGTH,
    ERROR_MAX_LENGTH,
    ERROR_RANGE,
    ERROR_ENUM,
)
from ..enum import ValidationErrorType
from .collector import ValidationCollector

Number = Union[int, float]


def is_present(value: Any) -> bool:
    """Text is present when non-blank; collections when non-empty; anything else when not None."""
    if value is None:
        return False
    if isinstance(value, str):
        return len(value.strip()) > 0
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) > 0
    return True


def check_required(
    value: Any,
    field: str,
    label: str,
    collector: ValidationCollector,
) -> bool:
    if is_present(value):
        return True
    collector.add_error(field, ERROR_REQUIRED.format(label=label), ValidationErrorType.REQUIRED)
    return False


def check_length(
    value: Optional[str],
    field: str,
    label: str,
    collector: ValidationCollector,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> bool:
    """
    Check a required text field.

    Reports `required` for missing or blank text, then `minLength`, then
    `maxLength`. Lengths are measured on the raw (untrimmed) value.
    """
    if not check_required(value, field, label, collector):
        return False
    if min_length is not None and len(value) < min_length:
        collector.add_error(
            field,
            ERROR_MIN_LENGTH.format(label=label, min_length=min_length),
            ValidationErrorType.MIN_LENGTH,
        )
        return False
    if max_length is not None and len(value) > max_length:
        collector.add_error(
            field,
            ERROR_MAX_LENGTH.format(label=label, max_length=max_length),
            ValidationErrorType.MAX_LENGTH,
        )
        return False
    return True


def check_range(
    value: Optional[Number],
    field: str,
    label: str,
    collector: ValidationCollector,
    minimum: Number,
    maximum: Number,
    unit: str = "",
) -> bool:
    """Check an inclusive numeric range. A missing value is reported as `required`."""
    if value is None:
        collector.add_error(field, ERROR_REQUIRED.format(label=label), ValidationErrorType.REQUIRED)
        return False
    if minimum <= value <= maximum:
        return True
    message = ERROR_RANGE.format(label=label, minimum=minimum, maximum=maximum)
    if unit:
        message = f"{message} {unit}"
    collector.add_error(field, message, ValidationErrorType.RANGE)
    return False


def check_enum(
    value: Optional[str],
    allowed: Iterable[str],
    field: str,
    label: str,
    collector: ValidationCollector,
) -> bool:
    """Check membership in a closed set of values. `label` is used lower-case (e.g. "agent type")."""
    allowed = list(allowed)
    if value in allowed:
        return True
    collector.add_error(
        field,
        ERROR_ENUM.format(label=label, allowed=", ".join(allowed)),
        ValidationErrorType.ENUM,
    )
    return False
