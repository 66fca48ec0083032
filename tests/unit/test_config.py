"""
Unit tests for the config module.

These tests cover:
- Default and environment-based settings loading
- Field validators for LOG_LEVEL and SUPPORTED_LOCALES
- Environment selection logic (development, testing, production)
"""

import pytest

from modelerrors.config import (
    BaseErrorSettings,
    DevelopmentSettings,
    ProductionSettings,
    TestingSettings,
    get_settings,
)


def test_base_settings_defaults():
    settings = BaseErrorSettings()
    assert settings.DEBUG is False
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_JSON_FORMAT is False
    assert settings.DEFAULT_LOCALE == "en"
    assert settings.SUPPORTED_LOCALES == ["en"]
    assert settings.TRANSLATIONS_DIRS == []
    assert settings.FULL_MESSAGE_FORMAT == "{attribute} {message}"
    assert settings.RAISE_ON_MISSING_TRANSLATIONS is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("DEBUG", "True")
    monkeypatch.setenv("DEFAULT_LOCALE", "de")
    monkeypatch.setenv("SUPPORTED_LOCALES", '["de", "fr"]')
    monkeypatch.setenv("RAISE_ON_MISSING_TRANSLATIONS", "true")
    settings = BaseErrorSettings()
    assert settings.DEBUG is True
    assert settings.DEFAULT_LOCALE == "de"
    assert settings.SUPPORTED_LOCALES == ["de", "fr"]
    assert settings.RAISE_ON_MISSING_TRANSLATIONS is True


def test_log_level_is_upper_cased():
    settings = BaseErrorSettings(LOG_LEVEL="warning")
    assert settings.LOG_LEVEL == "WARNING"


def test_default_locale_is_always_supported():
    settings = BaseErrorSettings(DEFAULT_LOCALE="de", SUPPORTED_LOCALES=["en", "fr"])
    assert settings.SUPPORTED_LOCALES == ["de", "en", "fr"]


@pytest.mark.parametrize(
    "env,settings_cls",
    [
        ("development", DevelopmentSettings),
        ("testing", TestingSettings),
        ("production", ProductionSettings),
        ("unknown", DevelopmentSettings),
    ],
)
def test_get_settings_environment(monkeypatch, env, settings_cls):
    monkeypatch.setenv("APP_ENV", env)
    assert type(get_settings()) is settings_cls


def test_get_settings_defaults_to_development():
    settings = get_settings()
    assert isinstance(settings, DevelopmentSettings)
    assert settings.DEBUG is True


def test_environment_specific_values():
    assert TestingSettings().RAISE_ON_MISSING_TRANSLATIONS is True
    production = ProductionSettings()
    assert production.DEBUG is False
    assert production.LOG_JSON_FORMAT is True
