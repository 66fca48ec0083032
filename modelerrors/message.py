"""
Normalization of the ``kind_or_message`` argument accepted by error records.

A value handed to ``ErrorCollection.add`` (or found under
``context["message"]``) is one of three things: a symbolic error kind, a
literal message, or a callable producing either of those. ``classify``
turns the raw value into one of the variants below so the rest of the code
never inspects runtime types again.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union


class Kind(str):
    """
    A symbolic error kind such as ``Kind("blank")``.

    Plain strings are literal messages; wrapping a name in ``Kind`` marks it
    as a lookup key instead. ``Kind`` compares equal to the plain string.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Kind({str.__repr__(self)})"


class ErrorKind:
    """Commonly used kinds, matching the bundled English messages."""

    INVALID = Kind("invalid")
    BLANK = Kind("blank")
    PRESENT = Kind("present")
    EMPTY = Kind("empty")
    ACCEPTED = Kind("accepted")
    CONFIRMATION = Kind("confirmation")
    INCLUSION = Kind("inclusion")
    EXCLUSION = Kind("exclusion")
    TAKEN = Kind("taken")
    TOO_LONG = Kind("too_long")
    TOO_SHORT = Kind("too_short")
    WRONG_LENGTH = Kind("wrong_length")
    NOT_A_NUMBER = Kind("not_a_number")
    NOT_AN_INTEGER = Kind("not_an_integer")
    GREATER_THAN = Kind("greater_than")
    GREATER_THAN_OR_EQUAL_TO = Kind("greater_than_or_equal_to")
    EQUAL_TO = Kind("equal_to")
    LESS_THAN = Kind("less_than")
    LESS_THAN_OR_EQUAL_TO = Kind("less_than_or_equal_to")
    OTHER_THAN = Kind("other_than")
    ODD = Kind("odd")
    EVEN = Kind("even")


DEFAULT_KIND = ErrorKind.INVALID


@dataclass(frozen=True)
class SymbolicKind:
    value: Kind


@dataclass(frozen=True)
class LiteralMessage:
    text: str


@dataclass(frozen=True)
class Deferred:
    producer: Callable[..., Any]

    def resolve(self, *args: Any) -> Union["SymbolicKind", "LiteralMessage", None]:
        """Call the producer and classify what it returns."""
        return classify(self.producer(*args))


ParsedMessage = Union[SymbolicKind, LiteralMessage, Deferred]


def is_symbolic(value: Any) -> bool:
    return isinstance(value, (Kind, Enum))


def to_kind(value: Any) -> Kind:
    """Normalize a ``Kind`` or ``Enum`` member to ``Kind``."""
    if isinstance(value, Kind):
        return value
    if isinstance(value, Enum):
        return Kind(value.value)
    return Kind(value)


def classify(value: Any) -> Optional[ParsedMessage]:
    """
    Classify a raw ``kind_or_message`` value.

    Returns:
        ``SymbolicKind`` for ``Kind``/``Enum`` values, ``LiteralMessage`` for
        other strings, ``Deferred`` for callables and ``None`` for ``None``.

    Raises:
        TypeError: For any other value
    """
    if value is None:
        return None
    if is_symbolic(value):
        return SymbolicKind(to_kind(value))
    if isinstance(value, str):
        return LiteralMessage(value)
    if callable(value):
        return Deferred(value)
    raise TypeError(
        f"expected a Kind, a message string or a callable, got {type(value).__name__}"
    )
