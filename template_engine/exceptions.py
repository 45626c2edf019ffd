"""
Template Engine Exceptions Module.

Exceptions raised by the helpers around the validation engine (builders,
loaders and the execution gate). The validators themselves never raise for
malformed templates: findings are reported as data in a ValidationResult.
"""

from typing import Any, Dict, List, Optional


class TemplateError(Exception):
    """Base exception for all template-related errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class TemplateBuildError(TemplateError):
    """Raised when a builder is used incorrectly."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            error_code="TEMPLATE_BUILD_ERROR",
            details=details,
        )


class TemplateLoadError(TemplateError):
    """Raised when a template document cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        all_details = details or {}
        if source:
            all_details["source"] = source
        super().__init__(
            message,
            error_code="TEMPLATE_LOAD_ERROR",
            details=all_details,
        )
        self.source = source


class TemplateValidationError(TemplateError):
    """Raised when a template is required to be valid but is not."""

    def __init__(
        self,
        message: str,
        validation_errors: Optional[List[Dict[str, Any]]] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "TEMPLATE_VALIDATION_ERROR",
    ):
        all_details = details or {}
        all_details["validation_errors"] = validation_errors or []
        super().__init__(
            message,
            error_code=error_code,
            details=all_details,
        )
        self.validation_errors = validation_errors or []


class TemplateNotExecutableError(TemplateValidationError):
    """Raised by the execution gate when a template must not be submitted."""

    def __init__(
        self,
        template_name: str,
        validation_errors: Optional[List[Dict[str, Any]]] = None,
    ):
        count = len(validation_errors or [])
        super().__init__(
            f"Template '{template_name}' is not executable ({count} validation error(s))",
            validation_errors=validation_errors,
            details={"template_name": template_name},
            error_code="TEMPLATE_NOT_EXECUTABLE",
        )
        self.template_name = template_name


class AutoFixError(TemplateError):
    """Raised when an auto-fix targets a field that does not exist."""

    def __init__(self, field: str, details: Optional[Dict[str, Any]] = None):
        all_details = details or {}
        all_details["field"] = field
        super().__init__(
            f"Cannot apply fix: unknown field '{field}'",
            error_code="AUTO_FIX_ERROR",
            details=all_details,
        )
        self.field = field
