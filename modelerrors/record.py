"""
Error records.

An ``ErrorRecord`` represents one problem reported on one attribute of a
host object. It keeps a non-owning reference to the host and resolves its
display text on demand through the translator.
"""

import copy
import weakref
from typing import Any, Callable, Dict, List, Optional

from modelerrors.errors.exceptions import MissingTranslationError
from modelerrors.i18n import Translator, get_translator
from modelerrors.logging import get_logger
from modelerrors.message import (
    DEFAULT_KIND,
    Deferred,
    Kind,
    LiteralMessage,
    SymbolicKind,
    classify,
    is_symbolic,
    to_kind,
)
from modelerrors.naming import (
    human_attribute_name,
    i18n_scope,
    lookup_ancestors,
    model_name,
    read_attribute,
)

logger = get_logger(__name__)

BASE = "base"

CALLBACK_OPTIONS = ("if", "unless", "on", "allow_nil", "allow_blank", "strict")
MESSAGE_OPTIONS = ("message",)

DEFAULT_FULL_MESSAGE_FORMAT = "{attribute} {message}"


def reference(owner: Any) -> Callable[[], Any]:
    """
    Build a non-owning reference to a host.

    Objects that cannot be weakly referenced are held directly.
    """
    try:
        return weakref.ref(owner)
    except TypeError:
        return lambda: owner


def format_full_message(
    translator: Translator, owner_type: type, attribute: str, message: str
) -> str:
    """Prefix a message with the attribute label, except for ``base``."""
    if attribute == BASE:
        return message

    return translator.translate(
        "errors.format",
        {"attribute": human_attribute_name(owner_type, attribute), "message": message},
        default=getattr(translator, "full_message_format", DEFAULT_FULL_MESSAGE_FORMAT),
    )


class ErrorRecord:
    """
    One error on one attribute of a host object.

    Attributes:
        attribute: Name of the attribute, ``BASE`` for the object as a whole
        kind: Symbolic error kind, ``invalid`` unless given
        context: Interpolation values and options supplied by the caller
        raw_kind: The ``kind_or_message`` value originally supplied
        translator: Translator used for messages, the process default when None
    """

    def __init__(
        self,
        owner: Any,
        attribute: str,
        kind_or_message: Any = None,
        translator: Optional[Translator] = None,
        /,
        **context: Any,
    ):
        self.rebind(owner)
        self.attribute = str(attribute)
        self.raw_kind = kind_or_message
        self.translator = translator
        self.context: Dict[str, Any] = context

        parsed = classify(kind_or_message)
        if isinstance(parsed, Deferred):
            parsed = parsed.resolve(owner, self.context)

        kind: Optional[Kind] = parsed.value if isinstance(parsed, SymbolicKind) else None
        message = parsed if isinstance(parsed, LiteralMessage) else None

        context_message = classify(self.context.get("message"))
        if isinstance(context_message, SymbolicKind):
            kind = context_message.value
            del self.context["message"]
        elif message is None:
            message = context_message

        if isinstance(message, LiteralMessage):
            self.context["message"] = message.text

        self.kind: Kind = kind or DEFAULT_KIND
        self._message = message

    @property
    def owner(self) -> Any:
        """The host object, or None once it has been garbage collected."""
        return self._owner_ref()

    base = owner

    def rebind(self, owner: Any) -> None:
        """Point the record at another host object."""
        self._owner_ref = reference(owner)
        self.owner_type = type(owner)

    def _translator(self) -> Translator:
        return self.translator or get_translator()

    def _lookup_keys(self, kind: str) -> List[str]:
        keys = []
        scope = i18n_scope(self.owner_type)
        if scope:
            for klass in lookup_ancestors(self.owner_type):
                key = model_name(klass).i18n_key
                keys.append(f"{scope}.errors.models.{key}.attributes.{self.attribute}.{kind}")
                keys.append(f"{scope}.errors.models.{key}.{kind}")
            keys.append(f"{scope}.errors.messages.{kind}")

        keys.append(f"errors.attributes.{self.attribute}.{kind}")
        keys.append(f"errors.messages.{kind}")
        return keys

    def _options(self) -> Dict[str, Any]:
        return {k: v for k, v in self.context.items() if k not in MESSAGE_OPTIONS}

    def message(self) -> str:
        """
        Resolve the display text of the error.

        Keys are looked up from most to least specific: model scoped keys
        for every ancestor of the host type (when it declares an
        ``i18n_scope``), then ``errors.attributes.<attribute>.<kind>`` and
        ``errors.messages.<kind>``. A literal message given by the caller
        is used after the most specific key.

        The model name, the attribute label, the attribute value and the
        host object are available for interpolation, together with the
        caller's context entries.
        """
        translator = self._translator()
        owner = self.owner
        keys = self._lookup_keys(self.kind)
        default = None

        override = self._message
        if isinstance(override, Deferred):
            override = override.resolve(self, self._options())
        if isinstance(override, LiteralMessage):
            keys, default = keys[:1], override.text
        elif isinstance(override, SymbolicKind):
            keys = keys[:1] + self._lookup_keys(override.value)

        values = {
            "model": model_name(self.owner_type).human,
            "attribute": human_attribute_name(self.owner_type, self.attribute),
            "value": read_attribute(owner, self.attribute) if self.attribute != BASE else None,
            "object": owner,
        }
        values.update(self._options())

        try:
            return translator.translate(keys, values, default=default)
        except MissingTranslationError:
            if getattr(translator, "raise_on_missing", False):
                raise
            logger.warning(
                f"No translation for {self.attribute}.{self.kind}, tried {keys}",
                extra={"attribute": self.attribute, "kind": str(self.kind), "keys": keys},
            )
            return self.kind.replace("_", " ")

    def full_message(self) -> str:
        """The message prefixed with the attribute label, unless the attribute is ``base``."""
        return format_full_message(
            self._translator(), self.owner_type, self.attribute, self.message()
        )

    def matches(
        self, attribute: Optional[str] = None, kind: Any = None, /, **context: Any
    ) -> bool:
        """
        Check the record against a partial filter.

        Args:
            attribute: Required attribute, any when None
            kind: Required kind, any when None
            **context: Context entries that must be present and equal

        Returns:
            True when every given constraint holds
        """
        if attribute is not None and self.attribute != str(attribute):
            return False

        if kind is not None:
            if is_symbolic(kind):
                kind = to_kind(kind)
            if self.kind != kind:
                return False

        for key, value in context.items():
            if key not in self.context or self.context[key] != value:
                return False

        return True

    def details(self) -> Dict[str, Any]:
        """Machine readable view: the kind plus context without control options."""
        details: Dict[str, Any] = {"kind": self.kind}
        details.update(
            (key, value)
            for key, value in self.context.items()
            if key not in CALLBACK_OPTIONS and key not in MESSAGE_OPTIONS
        )
        return details

    def __deepcopy__(self, memo: Dict[int, Any]) -> "ErrorRecord":
        cls = type(self)
        duplicate = cls.__new__(cls)
        memo[id(self)] = duplicate
        for name, value in self.__dict__.items():
            if name in ("_owner_ref", "owner_type", "translator"):
                setattr(duplicate, name, value)
            else:
                setattr(duplicate, name, copy.deepcopy(value, memo))
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorRecord):
            return NotImplemented
        return (self.attribute, self.kind, self.context) == (
            other.attribute,
            other.kind,
            other.context,
        )

    def __hash__(self) -> int:
        return hash((self.attribute, self.kind))

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} attribute={self.attribute!r}, "
            f"kind={self.kind!r}, context={self.context!r}>"
        )


class NestedErrorRecord(ErrorRecord):
    """
    An error imported from another collection.

    The record belongs to the importing host and may use another attribute
    or kind; its message is the one of the wrapped record. The context dict
    is shared with the wrapped record, unlike the copies made by
    ``ErrorCollection.copy_from``.
    """

    def __init__(
        self,
        owner: Any,
        inner_error: ErrorRecord,
        attribute: Optional[str] = None,
        kind: Any = None,
        translator: Optional[Translator] = None,
    ):
        self.rebind(owner)
        self.inner_error = inner_error
        self.attribute = str(attribute) if attribute is not None else inner_error.attribute
        self.kind = to_kind(kind) if kind is not None else inner_error.kind
        self.raw_kind = inner_error.raw_kind
        self.context = inner_error.context
        self.translator = translator if translator is not None else inner_error.translator
        self._message = inner_error._message

    def message(self) -> str:
        return self.inner_error.message()
