"""
Middleware for FastAPI applications using modelerrors.
"""

from modelerrors.middleware.i18n import I18nConfig, LocaleMiddleware, configure_i18n

__all__ = [
    "I18nConfig",
    "LocaleMiddleware",
    "configure_i18n",
]
