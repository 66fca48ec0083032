"""
Configuration module for modelerrors.

This module provides:
- BaseErrorSettings: The base class for settings, supporting environment variable loading.
- Environment-specific settings (development, testing, production).
- get_settings: Factory for loading the correct settings class based on APP_ENV.

Example environment variables:

APP_ENV="development"  # Options: development, testing, production
DEBUG=false
LOG_LEVEL="INFO"
LOG_JSON_FORMAT=false
DEFAULT_LOCALE="en"
SUPPORTED_LOCALES='["en", "de"]'
TRANSLATIONS_DIRS='["app/locales"]'
FULL_MESSAGE_FORMAT="{attribute} {message}"
RAISE_ON_MISSING_TRANSLATIONS=false
"""

from .base import BaseErrorSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .settings import get_settings
from .testing import TestingSettings

__all__ = [
    "BaseErrorSettings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestingSettings",
    "get_settings",
]
