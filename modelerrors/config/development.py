"""
Development environment specific settings.
"""

from .base import BaseErrorSettings


class DevelopmentSettings(BaseErrorSettings):
    """
    Settings class for development environment.

    Attributes:
        DEBUG: Always True in development
    """

    DEBUG: bool = True
