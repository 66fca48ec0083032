"""
Exception handlers for FastAPI applications.

This module converts modelerrors exceptions, including ``ValidationError``
raised for a model holding errors, into standardized API responses.
"""

import traceback
from functools import partial
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from modelerrors.errors.exceptions import AppError
from modelerrors.i18n.context import get_locale
from modelerrors.logging import Logger, ensure_logger
from modelerrors.schemas import ErrorInfo, ErrorResponse
from modelerrors.schemas.metadata import ResponseMetadata


def create_error_response(
    message: str,
    code: str = "ERROR",
    errors: Optional[List[ErrorInfo]] = None,
    metadata: Optional[ResponseMetadata] = None,
) -> ErrorResponse:
    """
    Create a standardized error response.

    Args:
        message: Error message
        code: Error code identifier
        errors: Detailed error information list
        metadata: Additional metadata for the response

    Returns:
        Standardized error response
    """
    return ErrorResponse(
        success=False,
        message=message,
        errors=errors or [ErrorInfo(code=code, message=message)],
        metadata=metadata or ResponseMetadata(locale=get_locale() or "en"),
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """
    Handler for AppError and its subclasses.

    Errors carrying per-field entries (``ValidationError``) produce one
    ``ErrorInfo`` per recorded error.

    Args:
        request: FastAPI request
        exc: AppError instance

    Returns:
        JSON response with error details
    """
    errors = [ErrorInfo(code=exc.code, message=exc.message)]

    fields = getattr(exc, "fields", None)
    if fields:
        errors = [
            ErrorInfo(
                code=field_error.get("code", exc.code),
                message=field_error.get("message", exc.message),
                field=field_error.get("field"),
            )
            for field_error in fields
        ]

    response = create_error_response(
        message=exc.message,
        code=exc.code,
        errors=errors,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(response),
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Generic exception handler for unhandled exceptions.

    Args:
        request: FastAPI request
        exc: Unhandled exception
        logger: Optional logger to use instead of default logging

    Returns:
        JSON response with generic error message
    """
    log = ensure_logger(logger, __name__)
    log.error(f"Unhandled exception: {str(exc)}")
    log.error(traceback.format_exc())

    response = create_error_response(
        message="Internal server error",
        code="INTERNAL_ERROR",
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=jsonable_encoder(response),
    )


def register_exception_handlers(app: FastAPI, logger: Optional[Logger] = None) -> None:
    """
    Register all exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance
        logger: Optional logger for logging exceptions
    """
    # Handles every subclass, ValidationError and StrictValidationFailed included
    app.exception_handler(AppError)(app_error_handler)

    global_handler = partial(unhandled_exception_handler, logger=logger)
    app.exception_handler(Exception)(global_handler)
