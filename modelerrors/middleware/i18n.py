"""
Locale detection middleware for FastAPI applications.

The middleware picks the locale for each request so that error messages
rendered while handling it are translated accordingly.
"""

from typing import List, Optional

from fastapi import FastAPI, Request, Response
from pydantic import BaseModel, Field
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from modelerrors.i18n import reset_locale, set_locale
from modelerrors.logging import get_logger

logger = get_logger(__name__)


class I18nConfig(BaseModel):
    """Configuration for the locale middleware."""

    default_locale: str = Field(
        default="en",
        description="Locale to use when the request does not select one",
    )
    supported_locales: List[str] = Field(
        default=["en"], description="List of supported locale codes"
    )
    cookie_name: str = Field(
        default="locale",
        description="Name of the cookie storing the user's locale preference",
    )
    header_name: str = Field(
        default="Accept-Language",
        description="Name of the header to check for locale preference",
    )
    query_param_name: str = Field(
        default="locale",
        description="Name of the query parameter to check for locale preference",
    )


class LocaleMiddleware(BaseHTTPMiddleware):
    """
    Middleware selecting the translation locale per request.

    The locale is detected from the query parameter, the cookie and the
    Accept-Language header, in that order, and stored on ``request.state``
    as well as in the current context for the translator.
    """

    def __init__(
        self,
        app: ASGIApp,
        default_locale: str = "en",
        supported_locales: Optional[List[str]] = None,
        cookie_name: str = "locale",
        header_name: str = "Accept-Language",
        query_param_name: str = "locale",
    ):
        """
        Initialize the locale middleware.

        Args:
            app: The ASGI application
            default_locale: Default locale code
            supported_locales: List of supported locale codes
            cookie_name: Name of the cookie storing the locale preference
            header_name: Name of the header to check for locale preference
            query_param_name: Name of the query parameter for the locale
        """
        super().__init__(app)
        self.default_locale = default_locale
        self.supported_locales = supported_locales or [default_locale]
        self.cookie_name = cookie_name
        self.header_name = header_name
        self.query_param_name = query_param_name

        logger.info(
            f"Locale middleware initialized with default locale {default_locale} "
            f"and supported locales {', '.join(self.supported_locales)}"
        )

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """
        Process the request with the detected locale selected.

        Args:
            request: The FastAPI request
            call_next: The next middleware or endpoint handler

        Returns:
            The response from the next handler
        """
        locale = self._detect_locale(request)
        request.state.locale = locale

        token = set_locale(locale)
        try:
            response = await call_next(request)
            response.headers["Content-Language"] = locale
            return response
        finally:
            reset_locale(token)

    def _detect_locale(self, request: Request) -> str:
        """
        Detect the preferred locale from the request.

        Checks, in order: query parameter, cookie, Accept-Language header,
        default locale.
        """
        if self.query_param_name and self.query_param_name in request.query_params:
            locale = request.query_params[self.query_param_name]
            if locale in self.supported_locales:
                return locale

        if self.cookie_name and self.cookie_name in request.cookies:
            locale = request.cookies[self.cookie_name]
            if locale in self.supported_locales:
                return locale

        if self.header_name and self.header_name in request.headers:
            # Parse Accept-Language header (e.g. "en-US,en;q=0.9,es;q=0.8")
            header = request.headers[self.header_name]
            locales = [item.split(";")[0].strip() for item in header.split(",")]

            for locale in locales:
                if locale in self.supported_locales:
                    return locale

            # Language code matches (e.g. "de-AT" -> "de")
            for locale in locales:
                code = locale.split("-")[0]
                if code in self.supported_locales:
                    return code

        return self.default_locale


def configure_i18n(
    app: FastAPI,
    config: Optional[I18nConfig] = None,
    **kwargs,
) -> None:
    """
    Install the locale middleware on a FastAPI application.

    Args:
        app: The FastAPI application instance
        config: An I18nConfig instance
        **kwargs: Settings overriding config values

    Example:
        ```python
        app = FastAPI()
        configure_i18n(app, default_locale="en", supported_locales=["en", "de"])
        ```
    """
    if config is None:
        config = I18nConfig()

    params = config.model_dump()
    params.update({k: v for k, v in kwargs.items() if v is not None})

    app.add_middleware(LocaleMiddleware, **params)
