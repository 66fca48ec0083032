"""
Host object contract.

Error records need a few things from the object they belong to: the current
value of an attribute, human readable labels for the object's type and its
attributes, and the chain of types used to scope translation keys. The
helpers here ask the host for each of these and fall back to sensible
defaults for plain objects that implement none of them.

A host may define:

- ``read_attribute_for_validation(attribute)``
- ``human_attribute_name(attribute, default=None)`` (classmethod)
- ``model_name()`` (classmethod returning a ``ModelName``)
- ``lookup_ancestors()`` (classmethod, most specific type first)
- ``i18n_scope`` (class attribute enabling model-scoped message keys)
"""

import re
from typing import Any, List, Optional

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(name: str) -> str:
    """Convert ``CamelCase`` to ``snake_case``."""
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.replace("-", "_").lower()


def humanize(value: Any) -> str:
    """
    Turn an identifier into a label: ``"first_name"`` gives ``"First name"``.

    A trailing ``_id`` is dropped and dots are treated like underscores.
    """
    text = str(value).replace(".", "_")
    if text.endswith("_id") and len(text) > 3:
        text = text[:-3]
    text = text.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


class ModelName:
    """
    Naming information for a model type.

    Attributes:
        name: The class name
        i18n_key: Key segment used in translation keys
        human: Human readable model name
    """

    def __init__(self, name: str, i18n_key: Optional[str] = None, human: Optional[str] = None):
        self.name = name
        self.i18n_key = i18n_key or underscore(name)
        self.human = human or humanize(self.i18n_key)

    @classmethod
    def for_class(cls, klass: type) -> "ModelName":
        return cls(klass.__name__)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ModelName(name={self.name!r}, i18n_key={self.i18n_key!r}, human={self.human!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModelName):
            return (self.name, self.i18n_key) == (other.name, other.i18n_key)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.name, self.i18n_key))


def model_name(owner_type: type) -> ModelName:
    """Get the host type's ``ModelName``."""
    hook = getattr(owner_type, "model_name", None)
    if callable(hook):
        name = hook()
        if isinstance(name, ModelName):
            return name
    return ModelName.for_class(owner_type)


def i18n_scope(owner_type: type) -> Optional[str]:
    """Get the translation scope of the host type, if it has one."""
    scope = getattr(owner_type, "i18n_scope", None)
    return str(scope) if scope else None


def lookup_ancestors(owner_type: type) -> List[type]:
    """Get the host type's ancestor chain, most specific first."""
    hook = getattr(owner_type, "lookup_ancestors", None)
    if callable(hook):
        return list(hook())
    return [owner_type]


def human_attribute_name(owner_type: type, attribute: str) -> str:
    """Get the label for an attribute of the host type."""
    default = humanize(attribute)
    hook = getattr(owner_type, "human_attribute_name", None)
    if callable(hook):
        return str(hook(attribute, default=default))
    return default


def read_attribute(owner: Any, attribute: str) -> Any:
    """Read the current value of an attribute from the host."""
    if owner is None:
        return None
    hook = getattr(owner, "read_attribute_for_validation", None)
    if callable(hook):
        return hook(attribute)
    return getattr(owner, attribute, None)
