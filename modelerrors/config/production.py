"""
Production environment specific settings.
"""

from .base import BaseErrorSettings


class ProductionSettings(BaseErrorSettings):
    """
    Settings class for production environment.

    Attributes:
        DEBUG: Always False in production
        LOG_JSON_FORMAT: Structured logs for aggregation
    """

    DEBUG: bool = False
    LOG_JSON_FORMAT: bool = True
