"""
Validation Collector

Per-call accumulator of errors and warnings. Every validation entry point
creates its own collector and freezes it into a result, so no findings are
shared between calls.

Version: 1.0.0
"""

from typing import List, Union

from ..enum import ValidationErrorType
from ..spec.validation_models import ValidationError, ValidationResult


class ValidationCollector:
    """Mutable list of findings owned by a single validation pass."""

    def __init__(self):
        self.errors: List[ValidationError] = []
        self.warnings: List[str] = []

    def add_error(
        self,
        field: str,
        message: str,
        error_type: Union[ValidationErrorType, str] = ValidationErrorType.CUSTOM,
    ) -> None:
        if isinstance(error_type, ValidationErrorType):
            error_type = error_type.value
        self.errors.append(ValidationError(field=field, message=message, type=error_type))

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def to_result(self) -> ValidationResult:
        """Freeze the findings into an immutable ValidationResult."""
        return ValidationResult(
            is_valid=not self.errors,
            errors=list(self.errors),
            warnings=list(self.warnings),
        )
