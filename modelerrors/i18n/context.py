"""
Current locale selection.

The locale lives in a context variable, so every request or task handled
concurrently sees its own selection.
"""

import contextvars
from contextlib import contextmanager
from typing import Iterator, Optional

_current_locale: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "modelerrors_locale", default=None
)


def get_locale() -> Optional[str]:
    """
    Get the locale selected for the current context.

    Returns:
        The current locale code, or None when none was selected
    """
    return _current_locale.get()


def set_locale(locale: Optional[str]) -> contextvars.Token:
    """Select the locale for the current context."""
    return _current_locale.set(locale)


def reset_locale(token: contextvars.Token) -> None:
    """Restore the selection made before ``set_locale`` returned the token."""
    _current_locale.reset(token)


@contextmanager
def use_locale(locale: Optional[str]) -> Iterator[None]:
    """
    Temporarily select a locale.

    Example:
        ```python
        with use_locale("de"):
            person.errors.full_messages()
        ```
    """
    token = set_locale(locale)
    try:
        yield
    finally:
        reset_locale(token)
