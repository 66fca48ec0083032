"""
Base class for host objects.

``Model`` gives an object an ``errors`` collection and implements the host
contract used by error records: attribute reading, translated model and
attribute names, and the ancestor chain used to scope message keys.

Example:
    ```python
    class Person(Model):
        def __init__(self, name=None):
            super().__init__()
            self.name = name

    person = Person()
    person.errors.add("name", ErrorKind.BLANK)
    person.errors.full_messages()  # ["Name can't be blank"]
    ```
"""

import copy
from typing import Any, ClassVar, Dict, List, Optional

from modelerrors.collection import ErrorCollection
from modelerrors.errors.exceptions import UnknownAttributeError, ValidationError
from modelerrors.i18n import Translator, get_translator
from modelerrors.naming import ModelName, humanize


class Model:
    """
    Base class for objects that collect errors.

    Class attributes:
        i18n_scope: Top-level translation scope for model specific keys
        translator: Translator for this model, the process default when None

    Translations looked up for a ``Person`` model in the default scope:

    * ``modelerrors.models.person``: the human model name
    * ``modelerrors.attributes.person.<attribute>``: attribute labels
    * ``modelerrors.errors.models.person.attributes.<attribute>.<kind>``
      and ``modelerrors.errors.models.person.<kind>``: error messages
    """

    i18n_scope: ClassVar[str] = "modelerrors"
    translator: ClassVar[Optional[Translator]] = None

    def __init__(self, **attributes: Any):
        self.errors = ErrorCollection(self, translator=type(self).translator)
        for name, value in attributes.items():
            setattr(self, name, value)

    @classmethod
    def _translator(cls) -> Translator:
        return cls.translator or get_translator()

    @classmethod
    def lookup_ancestors(cls) -> List[type]:
        """Model classes in the MRO, most specific first."""
        return [
            klass
            for klass in cls.__mro__
            if isinstance(klass, type) and issubclass(klass, Model) and klass is not Model
        ]

    @classmethod
    def model_name(cls) -> ModelName:
        """
        Naming information with the translated human name.

        Ancestors are tried when the class itself has no translation.
        """
        name = ModelName.for_class(cls)
        keys = [
            f"{cls.i18n_scope}.models.{ModelName.for_class(klass).i18n_key}"
            for klass in cls.lookup_ancestors()
        ]
        human = cls._translator().translate(keys, default=humanize(name.i18n_key))
        return ModelName(cls.__name__, name.i18n_key, human)

    @classmethod
    def human_attribute_name(cls, attribute: str, default: Optional[str] = None) -> str:
        """Translated label of an attribute, falling back to its humanized name."""
        attribute = str(attribute)
        keys = [
            f"{cls.i18n_scope}.attributes.{ModelName.for_class(klass).i18n_key}.{attribute}"
            for klass in cls.lookup_ancestors()
        ]
        keys.append(f"attributes.{attribute}")
        return cls._translator().translate(keys, default=default or humanize(attribute))

    def read_attribute_for_validation(self, attribute: str) -> Any:
        try:
            return getattr(self, attribute)
        except AttributeError:
            raise UnknownAttributeError(self, attribute) from None

    def raise_on_errors(self) -> None:
        """
        Raise when errors have been recorded.

        Raises:
            ValidationError: The model holds at least one error
        """
        if self.errors:
            raise ValidationError(self)

    def __copy__(self) -> "Model":
        cls = type(self)
        duplicate = cls.__new__(cls)
        duplicate.__dict__.update(self.__dict__)
        duplicate.errors = ErrorCollection(duplicate, translator=self.errors.translator)
        duplicate.errors.copy_from(self.errors)
        return duplicate

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Model":
        cls = type(self)
        duplicate = cls.__new__(cls)
        memo[id(self)] = duplicate
        for name, value in self.__dict__.items():
            if name != "errors":
                setattr(duplicate, name, copy.deepcopy(value, memo))
        duplicate.errors = ErrorCollection(duplicate, translator=self.errors.translator)
        duplicate.errors.copy_from(self.errors)
        return duplicate
