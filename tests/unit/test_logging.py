"""
Unit tests for the logging module.

Covers:
- Logger creation and retrieval (get_logger, ensure_logger)
- Logger configuration (setup_logger)
- JSON formatter output (JsonFormatter)
- Warnings logged for untranslated error kinds
"""
import json
import logging

import pytest

from modelerrors import Kind
from modelerrors.logging import JsonFormatter, ensure_logger, get_logger, setup_logger


@pytest.fixture
def dummy_settings():
    class DummySettings:
        DEBUG = False
        LOG_LEVEL = "DEBUG"
        LOG_JSON_FORMAT = False

    return DummySettings()


def test_get_logger_returns_logger(dummy_settings):
    logger = get_logger("test.module", dummy_settings)
    assert isinstance(logger, logging.Logger)
    assert logger.name == "test.module"
    assert logger.level == logging.DEBUG


def test_get_logger_without_settings():
    logger = get_logger("test.nosettings")
    assert logger.level == logging.INFO
    assert not isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_get_logger_json_format_from_settings(dummy_settings):
    dummy_settings.LOG_JSON_FORMAT = True
    logger = get_logger("test.json_settings", dummy_settings)
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_get_logger_json_format_override(dummy_settings):
    dummy_settings.LOG_JSON_FORMAT = True
    logger = get_logger("test.json_override", dummy_settings, json_format=False)
    assert not isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_ensure_logger_returns_existing_logger(dummy_settings):
    logger = get_logger("test.ensure", dummy_settings)
    ensured = ensure_logger(logger, "test.ensure", dummy_settings)
    assert ensured is logger


def test_ensure_logger_creates_new_logger(dummy_settings):
    ensured = ensure_logger(None, "test.ensure2", dummy_settings)
    assert isinstance(ensured, logging.Logger)
    assert ensured.name == "test.ensure2"


def test_ensure_logger_raises_without_name():
    with pytest.raises(ValueError):
        ensure_logger()


def test_setup_logger_sets_level():
    logger = setup_logger("test.setup", level="WARNING")
    assert logger.level == logging.WARNING


def test_setup_logger_debug_overrides_level():
    logger = setup_logger("test.debug", level="ERROR", debug=True)
    assert logger.level == logging.DEBUG


def test_setup_logger_removes_existing_handlers():
    logger = logging.getLogger("test.handler")
    logger.handlers.clear()
    logger.addHandler(logging.StreamHandler())
    assert len(logger.handlers) == 1
    setup_logger("test.handler")
    assert len(logger.handlers) == 1


def test_setup_logger_invalid_level():
    logger = setup_logger("test.invalid", level="NOTALEVEL")
    assert logger.level == logging.INFO


def test_json_formatter_output():
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="test.json",
        level=logging.WARNING,
        pathname=__file__,
        lineno=42,
        msg="No translation for %s",
        args=("name.blank",),
        exc_info=None,
    )
    data = json.loads(formatter.format(record))
    assert data["message"] == "No translation for name.blank"
    assert data["level"] == "WARNING"
    assert data["logger"] == "test.json"
    assert "timestamp" in data


def test_missing_translation_is_logged(person, caplog):
    person.errors.add("name", Kind("unheard_of"))

    with caplog.at_level(logging.WARNING, logger="modelerrors.record"):
        assert person.errors["name"] == ["unheard of"]

    assert any("No translation for name.unheard_of" in r.getMessage() for r in caplog.records)


def test_json_formatter_includes_error_context():
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="test.json",
        level=logging.WARNING,
        pathname=__file__,
        lineno=42,
        msg="No translation",
        args=(),
        exc_info=None,
    )
    record.attribute = "name"
    record.kind = "unheard_of"
    record.keys = ["errors.messages.unheard_of"]

    data = json.loads(formatter.format(record))

    assert data["attribute"] == "name"
    assert data["kind"] == "unheard_of"
    assert data["keys"] == ["errors.messages.unheard_of"]
    assert "locale" not in data
    assert "exception" not in data


def test_missing_translation_log_carries_context(person, caplog):
    person.errors.add("name", Kind("unheard_of"))

    with caplog.at_level(logging.WARNING, logger="modelerrors.record"):
        person.errors.full_messages()

    record = caplog.records[-1]
    assert record.attribute == "name"
    assert record.kind == "unheard_of"
    assert record.keys[-1] == "errors.messages.unheard_of"
