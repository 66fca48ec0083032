"""
Base configuration module for modelerrors.

This module provides the base settings class that the environment-specific
settings classes inherit from. It covers logging, locale and message
formatting options.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseErrorSettings(BaseSettings):
    """
    Base settings class for error collection configuration.

    Attributes:
        DEBUG: Flag to enable/disable debug logging
        LOG_LEVEL: Logging level name used by modelerrors loggers
        LOG_JSON_FORMAT: Emit log records as JSON
        DEFAULT_LOCALE: Locale used when no locale is selected
        SUPPORTED_LOCALES: Locales for which translations are loaded
        TRANSLATIONS_DIRS: Extra directories holding ``<locale>.json`` files
        FULL_MESSAGE_FORMAT: Fallback pattern for full messages
        RAISE_ON_MISSING_TRANSLATIONS: Propagate missing translations instead
            of falling back to the bare error kind
    """

    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO", description="Logging level name")
    LOG_JSON_FORMAT: bool = Field(
        default=False, description="Emit log records as JSON"
    )

    # Translation configuration
    DEFAULT_LOCALE: str = Field(
        default="en", description="Locale used when no locale is selected"
    )
    SUPPORTED_LOCALES: List[str] = Field(
        default=["en"], description="Locales for which translations are loaded"
    )
    TRANSLATIONS_DIRS: List[str] = Field(
        default_factory=list,
        description="Directories holding <locale>.json translation files",
    )
    FULL_MESSAGE_FORMAT: str = Field(
        default="{attribute} {message}",
        description="Fallback pattern combining attribute label and message",
    )
    RAISE_ON_MISSING_TRANSLATIONS: bool = Field(
        default=False,
        description="Raise MissingTranslationError instead of falling back",
    )

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, value):
        """Accept log level names in any case."""
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("SUPPORTED_LOCALES", mode="after")
    def include_default_locale(cls, value, info):
        """Make sure the default locale is always loaded."""
        default_locale = info.data.get("DEFAULT_LOCALE", "en")
        if default_locale not in value:
            return [default_locale] + list(value)
        return value

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore"
    )
