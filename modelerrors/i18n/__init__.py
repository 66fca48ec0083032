"""
Internationalization for error messages.

Provides the Translator protocol, the default JSON-backed TranslationManager
and helpers for the process-wide translator and the current locale.
"""

from modelerrors.i18n.context import get_locale, reset_locale, set_locale, use_locale
from modelerrors.i18n.translator import (
    BUILTIN_TRANSLATIONS_DIR,
    TranslationManager,
    Translator,
    build_translator,
    get_translator,
    interpolate,
    set_translator,
)

__all__ = [
    "BUILTIN_TRANSLATIONS_DIR",
    "TranslationManager",
    "Translator",
    "build_translator",
    "get_locale",
    "get_translator",
    "interpolate",
    "reset_locale",
    "set_locale",
    "set_translator",
    "use_locale",
]
