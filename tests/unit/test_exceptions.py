"""
Unit tests for the exception classes (errors/exceptions.py).

Covers:
- Instantiation and attributes of all exception classes (parametrized)
- ValidationError built from a model's error collection
- UnknownAttributeError and MissingTranslationError messages
"""
import pytest

from modelerrors import (
    AppError,
    ErrorKind,
    MissingTranslationError,
    StrictValidationFailed,
    UnknownAttributeError,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc_cls,kwargs,expected",
    [
        (
            AppError,
            {},
            {
                "message": "An unexpected error occurred",
                "code": "ERROR",
                "status_code": 500,
                "details": {},
            },
        ),
        (
            AppError,
            {
                "message": "Custom",
                "code": "CUSTOM",
                "status_code": 418,
                "details": {"foo": "bar"},
            },
            {"message": "Custom", "code": "CUSTOM", "status_code": 418, "details": {"foo": "bar"}},
        ),
        (
            StrictValidationFailed,
            {},
            {"message": "Strict validation failed", "code": "STRICT_VALIDATION_FAILED", "status_code": 422},
        ),
        (
            StrictValidationFailed,
            {"message": "Name can't be blank"},
            {"message": "Name can't be blank", "status_code": 422},
        ),
        (
            MissingTranslationError,
            {"keys": ["errors.messages.odd"], "locale": "de"},
            {
                "message": "translation missing: de.errors.messages.odd",
                "code": "MISSING_TRANSLATION",
                "status_code": 500,
                "keys": ["errors.messages.odd"],
            },
        ),
        (
            MissingTranslationError,
            {"keys": [], "locale": "en"},
            {"message": "translation missing: en.", "keys": []},
        ),
    ],
)
def test_exception_attributes(exc_cls, kwargs, expected):
    """Test attributes of the exception classes."""
    err = exc_cls(**kwargs)
    assert isinstance(err, AppError)
    for key, value in expected.items():
        assert getattr(err, key) == value


def test_exception_str_is_message():
    assert str(StrictValidationFailed("name is invalid")) == "name is invalid"


def test_unknown_attribute_error(person):
    err = UnknownAttributeError(person, "nickname")
    assert isinstance(err, AttributeError)
    assert err.record is person
    assert err.status_code == 400
    assert err.code == "UNKNOWN_ATTRIBUTE"
    assert err.details == {"attribute": "nickname"}
    assert err.message == "unknown attribute 'nickname' for Person."


def test_validation_error_from_model(person):
    person.errors.add("name", ErrorKind.BLANK)
    person.errors.add("age", ErrorKind.GREATER_THAN, count=17)

    err = ValidationError(person)

    assert err.model is person
    assert err.code == "VALIDATION_ERROR"
    assert err.status_code == 422
    assert err.message == "Validation failed: name can't be blank, age must be greater than 17"
    assert err.fields == [
        {"field": "name", "code": "BLANK", "message": "name can't be blank"},
        {"field": "age", "code": "GREATER_THAN", "message": "age must be greater than 17"},
    ]
    assert err.details["errors"] == {
        "name": [{"kind": "blank"}],
        "age": [{"kind": "greater_than", "count": 17}],
    }


def test_validation_error_custom_message(person):
    person.errors.add("name")
    err = ValidationError(person, message="Person is invalid", code="INVALID_PERSON")
    assert err.message == "Person is invalid"
    assert err.code == "INVALID_PERSON"
    assert err.fields[0]["code"] == "INVALID"


def test_validation_error_message_is_translated(person, translator):
    translator.store_translations(
        "en", {"errors": {"messages": {"model_invalid": "Please fix: {errors}"}}}
    )
    person.errors.add("name", ErrorKind.BLANK)
    assert ValidationError(person).message == "Please fix: name can't be blank"
