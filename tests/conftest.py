import pytest

from modelerrors import ErrorCollection, ErrorKind
from modelerrors.i18n import TranslationManager, set_translator

SETTINGS_ENV_VARS = (
    "APP_ENV",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_JSON_FORMAT",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "TRANSLATIONS_DIRS",
    "FULL_MESSAGE_FORMAT",
    "RAISE_ON_MISSING_TRANSLATIONS",
)


class Person:
    """Host implementing the contract by hand, labels are the raw attribute names."""

    def __init__(self, name=None, age=None):
        self.name = name
        self.age = age
        self.errors = ErrorCollection(self)

    def validate(self):
        if self.name is None:
            self.errors.add("name", ErrorKind.BLANK, message="cannot be nil")

    def read_attribute_for_validation(self, attribute):
        return getattr(self, attribute)

    @classmethod
    def human_attribute_name(cls, attribute, default=None):
        return attribute

    @classmethod
    def lookup_ancestors(cls):
        return [cls]


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Keep the developer's environment out of settings loaded by tests
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def translator():
    """Fresh process-wide translator with the bundled English messages."""
    manager = TranslationManager()
    set_translator(manager)
    yield manager
    set_translator(None)


@pytest.fixture
def person_class():
    return Person


@pytest.fixture
def person():
    return Person()
