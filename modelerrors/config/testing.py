"""
Testing environment specific settings.

Missing translations surface as errors so that test suites notice
untranslated error kinds.
"""

from .base import BaseErrorSettings


class TestingSettings(BaseErrorSettings):
    """
    Settings class for testing environment.

    Attributes:
        DEBUG: Set to True for detailed test output
        RAISE_ON_MISSING_TRANSLATIONS: Missing keys raise instead of falling back
    """

    __test__ = False

    DEBUG: bool = True
    RAISE_ON_MISSING_TRANSLATIONS: bool = True
