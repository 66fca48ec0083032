"""
Exceptions and FastAPI error handling for modelerrors.
"""

from modelerrors.errors.exceptions import (
    AppError,
    MissingTranslationError,
    StrictValidationFailed,
    UnknownAttributeError,
    ValidationError,
)
from modelerrors.errors.handlers import register_exception_handlers
from modelerrors.errors.manager import setup_errors

__all__ = [
    # Main setup function
    "setup_errors",
    # Handler registration
    "register_exception_handlers",
    # Exception classes
    "AppError",
    "MissingTranslationError",
    "StrictValidationFailed",
    "UnknownAttributeError",
    "ValidationError",
]
