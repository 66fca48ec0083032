"""
Error management entry point for FastAPI applications.
"""

from typing import Optional

from fastapi import FastAPI

from modelerrors.config.base import BaseErrorSettings
from modelerrors.errors.handlers import register_exception_handlers
from modelerrors.logging import ensure_logger


def setup_errors(
    app: FastAPI,
    settings: Optional[BaseErrorSettings] = None,
    logger: Optional[object] = None,
) -> None:
    """
    Configure error handling for a FastAPI application.

    Registers the handlers that render modelerrors exceptions as
    ``ErrorResponse`` payloads.

    Args:
        app: FastAPI application instance
        settings: Optional settings used to configure the logger
        logger: Optional logger for logging exceptions
    """
    log = ensure_logger(logger, __name__, settings)
    register_exception_handlers(app, logger=log)
