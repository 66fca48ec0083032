"""
modelerrors - Validation error collection for model objects.

Attach typed errors to named attributes of an object, look them up by
attribute, kind or context, and render them as translated messages.

Usage:
    from modelerrors import ErrorKind, Model

    class Person(Model):
        pass

    person = Person(name=None)
    person.errors.add("name", ErrorKind.BLANK)
    person.errors.full_messages()  # ["Name can't be blank"]
"""

__version__ = "0.1.0"

# Public API exports
from modelerrors.config import BaseErrorSettings, get_settings
from modelerrors.logging import get_logger
from modelerrors.message import ErrorKind, Kind
from modelerrors.i18n import TranslationManager, Translator, get_translator, set_translator, use_locale
from modelerrors.record import BASE, ErrorRecord, NestedErrorRecord
from modelerrors.collection import ErrorCollection
from modelerrors.model import Model
from modelerrors.naming import ModelName
from modelerrors.errors import (
    AppError,
    MissingTranslationError,
    StrictValidationFailed,
    UnknownAttributeError,
    ValidationError,
    setup_errors,
)

__all__ = [
    "BASE",
    "AppError",
    "BaseErrorSettings",
    "ErrorCollection",
    "ErrorKind",
    "ErrorRecord",
    "Kind",
    "MissingTranslationError",
    "Model",
    "ModelName",
    "NestedErrorRecord",
    "StrictValidationFailed",
    "TranslationManager",
    "Translator",
    "UnknownAttributeError",
    "ValidationError",
    "get_logger",
    "get_settings",
    "get_translator",
    "set_translator",
    "setup_errors",
    "use_locale",
]
