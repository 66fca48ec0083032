"""
Error collection.

``ErrorCollection`` holds the ordered error records of one host object and
provides the operations to add, query, delete, import and format them.
"""

import copy
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from modelerrors.errors.exceptions import StrictValidationFailed
from modelerrors.i18n import Translator, get_translator
from modelerrors.logging import get_logger
from modelerrors.message import (
    DEFAULT_KIND,
    Deferred,
    LiteralMessage,
    SymbolicKind,
    classify,
)
from modelerrors.record import (
    ErrorRecord,
    NestedErrorRecord,
    format_full_message,
    reference,
)

logger = get_logger(__name__)


class ErrorCollection:
    """
    Ordered errors of a host object.

    Records keep their insertion order and duplicates are allowed. Iterating
    the collection yields the records; ``items()`` yields
    ``(attribute, message)`` pairs.

    Example:
        ```python
        errors = ErrorCollection(person)
        errors.add("name", Kind("blank"))
        errors.add("age", "must be a whole number")

        errors.full_messages()
        # ["Name can't be blank", "Age must be a whole number"]
        errors.details()
        # {"name": [{"kind": "blank"}], "age": [{"kind": "invalid"}]}
        ```
    """

    def __init__(self, owner: Any, translator: Optional[Translator] = None):
        """
        Initialize an empty collection.

        Args:
            owner: The host object the errors belong to
            translator: Translator for messages, the process default when None
        """
        self._owner_ref = reference(owner)
        self.translator = translator
        self._records: List[ErrorRecord] = []

    @property
    def owner(self) -> Any:
        return self._owner_ref()

    @property
    def records(self) -> List[ErrorRecord]:
        """A copy of the records, in insertion order."""
        return list(self._records)

    def _translator(self) -> Translator:
        return self.translator or get_translator()

    def _normalize_arguments(
        self, kind_or_message: Any, context: Dict[str, Any]
    ) -> Tuple[Any, Dict[str, Any]]:
        """
        Resolve producers and split a ``kind_or_message`` argument.

        Returns:
            The symbolic kind (or None) and the context, where a literal
            message ends up under ``message``
        """
        context = dict(context)
        owner = self.owner

        parsed = classify(kind_or_message)
        if isinstance(parsed, Deferred):
            parsed = parsed.resolve(owner, context)

        parsed_message = classify(context.get("message"))
        if isinstance(parsed_message, Deferred):
            parsed_message = parsed_message.resolve(owner, context)
            if parsed_message is None:
                del context["message"]

        kind = parsed.value if isinstance(parsed, SymbolicKind) else None
        if isinstance(parsed_message, SymbolicKind):
            kind = parsed_message.value
            del context["message"]
        elif isinstance(parsed_message, LiteralMessage):
            context["message"] = parsed_message.text

        if isinstance(parsed, LiteralMessage):
            context["message"] = parsed.text

        return kind, context

    def add(
        self,
        attribute: str,
        kind_or_message: Any = None,
        /,
        *,
        strict: Any = False,
        **context: Any,
    ) -> ErrorRecord:
        """
        Record an error on an attribute.

        Args:
            attribute: Attribute name, ``"base"`` for the object as a whole
            kind_or_message: A ``Kind``, a literal message, or a callable taking
                ``(owner, context)`` and returning either
            strict: True to raise ``StrictValidationFailed`` instead of
                recording, or an exception class to raise instead
            **context: Interpolation values and options, ``message`` may
                override the default text. Entries may reuse the names of
                the positional parameters, ``attribute`` then overrides the
                attribute label in the message

        Returns:
            The new record

        Raises:
            StrictValidationFailed: When ``strict`` is True
        """
        kind, context = self._normalize_arguments(kind_or_message, context)
        record = ErrorRecord(self.owner, attribute, kind, self.translator, **context)
        record.raw_kind = kind_or_message

        if strict:
            if isinstance(strict, type) and issubclass(strict, BaseException):
                exception = strict
            else:
                exception = StrictValidationFailed
            message = record.full_message()
            logger.debug(f"Strict validation failed on {attribute}: {message}")
            raise exception(message)

        self._records.append(record)
        return record

    def where(
        self, attribute: Optional[str] = None, kind_or_message: Any = None, /, **context: Any
    ) -> List[ErrorRecord]:
        """
        Find the records matching a filter.

        Omitted arguments match anything. A literal message argument matches
        records created with that literal message.
        """
        kind, context = self._normalize_arguments(kind_or_message, context)
        return [record for record in self._records if record.matches(attribute, kind, **context)]

    def added(
        self, attribute: Optional[str] = None, kind_or_message: Any = None, /, **context: Any
    ) -> bool:
        """
        Check whether an error has been added.

        A symbolic (or omitted) kind is matched against the stored kind. A
        literal message is compared with the resolved messages of the
        attribute's records, so ``added("name", "can't be blank")`` is true
        after ``add("name", Kind("blank"))``.
        """
        parsed = classify(kind_or_message)
        if isinstance(parsed, Deferred):
            parsed = parsed.resolve(self.owner, context)

        if isinstance(parsed, LiteralMessage):
            return any(
                record.message() == parsed.text for record in self.where(attribute, **context)
            )

        kind = parsed.value if isinstance(parsed, SymbolicKind) else None
        return bool(self.where(attribute, kind, **context))

    def delete(
        self, attribute: Optional[str] = None, kind_or_message: Any = None, /, **context: Any
    ) -> List[str]:
        """
        Remove the records matching a filter.

        Returns:
            The messages of the removed records, resolved before removal
        """
        removed = self.where(attribute, kind_or_message, **context)
        messages = [record.message() for record in removed]
        removed_ids = {id(record) for record in removed}
        self._records = [record for record in self._records if id(record) not in removed_ids]
        if removed:
            logger.debug(f"Deleted {len(removed)} error(s) matching attribute={attribute}")
        return messages

    def import_error(
        self, error: ErrorRecord, attribute: Optional[str] = None, kind: Any = None
    ) -> NestedErrorRecord:
        """
        Import a record from another collection.

        The imported record belongs to this collection's owner and may be
        filed under another attribute or kind. The original is not modified.

        Args:
            error: The record to import
            attribute: Attribute to file the error under, the original when None
            kind: Kind override, the original when None
        """
        nested = NestedErrorRecord(
            self.owner, error, attribute=attribute, kind=kind, translator=self.translator
        )
        self._records.append(nested)
        return nested

    def merge(self, other: "ErrorCollection") -> None:
        """Import every record of another collection, keeping their order."""
        records = list(other)
        for record in records:
            self.import_error(record)
        logger.debug(f"Merged {len(records)} error(s)")

    def copy_from(self, other: "ErrorCollection") -> None:
        """
        Replace the records with copies of another collection's records.

        The copies belong to this collection's owner.
        """
        records = copy.deepcopy(other._records)
        owner = self.owner
        for record in records:
            record.rebind(owner)
        self._records = records

    def clear(self) -> None:
        self._records = []

    def _group(self, transform: Callable[[ErrorRecord], Any]) -> Dict[str, List[Any]]:
        grouped: Dict[str, List[Any]] = {}
        for record in self._records:
            grouped.setdefault(record.attribute, []).append(transform(record))
        return grouped

    def to_messages(self) -> Dict[str, List[str]]:
        """Messages grouped by attribute."""
        return self._group(lambda record: record.message())

    def to_full_messages(self) -> Dict[str, List[str]]:
        """Full messages grouped by attribute."""
        return self._group(lambda record: record.full_message())

    def as_json(self, full_messages: bool = False) -> Dict[str, List[str]]:
        if full_messages:
            return self.to_full_messages()
        return self.to_messages()

    def details(self) -> Dict[str, List[Dict[str, Any]]]:
        """Kind and context of every record grouped by attribute, without translation."""
        return self._group(lambda record: record.details())

    def group_by_attribute(self) -> Dict[str, List[ErrorRecord]]:
        return self._group(lambda record: record)

    def full_messages(self) -> List[str]:
        return [record.full_message() for record in self._records]

    def messages_for(self, attribute: str) -> List[str]:
        return [record.message() for record in self.where(str(attribute))]

    def full_messages_for(self, attribute: str) -> List[str]:
        return [record.full_message() for record in self.where(str(attribute))]

    def attribute_names(self) -> List[str]:
        """Attributes with at least one error, in first-seen order."""
        return list(dict.fromkeys(record.attribute for record in self._records))

    def generate_message(
        self, attribute: str, kind: Any = DEFAULT_KIND, /, **options: Any
    ) -> str:
        """Resolve the message an error would have, without recording it."""
        return ErrorRecord(
            self.owner, attribute, kind, self.translator, **options
        ).message()

    def full_message(self, attribute: str, message: str) -> str:
        """Prefix a message with the label of an attribute of the owner."""
        return format_full_message(self._translator(), type(self.owner), str(attribute), message)

    def translate(self, key: str, default: Optional[str] = None, **values: Any) -> str:
        """Translate a key with this collection's translator."""
        return self._translator().translate(key, values, default=default)

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate over ``(attribute, message)`` pairs, one per error."""
        for record in list(self._records):
            yield record.attribute, record.message()

    def __getitem__(self, attribute: str) -> List[str]:
        return self.messages_for(attribute)

    def __contains__(self, attribute: object) -> bool:
        return any(record.attribute == str(attribute) for record in self._records)

    def __iter__(self) -> Iterator[ErrorRecord]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __copy__(self) -> "ErrorCollection":
        duplicate = type(self)(self.owner, translator=self.translator)
        duplicate._records = copy.deepcopy(self._records)
        return duplicate

    def __deepcopy__(self, memo: Dict[int, Any]) -> "ErrorCollection":
        duplicate = self.__copy__()
        memo[id(self)] = duplicate
        return duplicate

    def __repr__(self) -> str:
        return f"<ErrorCollection size={len(self)} attributes={self.attribute_names()!r}>"
