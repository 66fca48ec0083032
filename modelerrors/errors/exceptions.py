"""
Exception classes for modelerrors.

This module provides the exception hierarchy raised by the error collection
and its collaborators. The exceptions carry an HTTP status code so that the
FastAPI handlers can render them directly.
"""

from http import HTTPStatus
from typing import Any, Dict, List, Optional, Sequence


class AppError(Exception):
    """
    Base exception for all modelerrors errors.

    Attributes:
        message: Human-readable error message
        code: Error code identifier (default: ERROR)
        status_code: HTTP status code (default: 500)
        details: Additional error details
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        code: str = "ERROR",
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class StrictValidationFailed(AppError):
    """
    Raised by ``ErrorCollection.add`` when the ``strict`` option is set.

    The error is raised instead of being recorded.
    """

    def __init__(
        self,
        message: str = "Strict validation failed",
        code: str = "STRICT_VALIDATION_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details=details,
        )


class ValidationError(AppError):
    """
    Exception raised when a model holds errors.

    Attributes:
        model: The invalid model
        fields: One ``{"field", "code", "message"}`` entry per recorded error
    """

    def __init__(
        self,
        model: Any,
        message: Optional[str] = None,
        code: str = "VALIDATION_ERROR",
    ):
        self.model = model
        errors = model.errors
        self.fields: List[Dict[str, Any]] = [
            {
                "field": error.attribute,
                "code": str(error.kind).upper(),
                "message": error.full_message(),
            }
            for error in errors
        ]
        if message is None:
            message = errors.translate(
                "errors.messages.model_invalid",
                default="Validation failed: {errors}",
                errors=", ".join(entry["message"] for entry in self.fields),
            )

        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details={"errors": errors.details(), "fields": self.fields},
        )


class UnknownAttributeError(AppError, AttributeError):
    """Raised when reading an attribute the model does not have."""

    def __init__(self, record: Any, attribute: str, code: str = "UNKNOWN_ATTRIBUTE"):
        self.record = record
        self.attribute = attribute
        super().__init__(
            message=f"unknown attribute '{attribute}' for {type(record).__name__}.",
            code=code,
            status_code=HTTPStatus.BAD_REQUEST,
            details={"attribute": attribute},
        )


class MissingTranslationError(AppError):
    """Raised when none of the looked-up keys resolves and no default is given."""

    def __init__(
        self,
        keys: Sequence[str],
        locale: str,
        code: str = "MISSING_TRANSLATION",
    ):
        self.keys = list(keys)
        self.locale = locale
        super().__init__(
            message=f"translation missing: {locale}.{self.keys[0] if self.keys else ''}",
            code=code,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            details={"keys": self.keys, "locale": locale},
        )
