"""
Translation backend for error messages.

This module handles loading nested JSON translation files per locale and
resolving an ordered list of dotted keys to a final, interpolated string.
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Union

from modelerrors.errors.exceptions import MissingTranslationError
from modelerrors.i18n.context import get_locale
from modelerrors.logging import get_logger

logger = get_logger(__name__)

BUILTIN_TRANSLATIONS_DIR = Path(__file__).parent / "locale"

_INTERPOLATION_PATTERN = re.compile(r"\{(\w+)\}")


class Translator(Protocol):
    """Anything able to turn an ordered key list into a message."""

    def translate(
        self,
        keys: Union[str, Sequence[str]],
        values: Optional[Mapping[str, Any]] = None,
        default: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str:
        ...


def interpolate(template: str, values: Mapping[str, Any]) -> str:
    """
    Replace ``{name}`` placeholders with values.

    Placeholders without a value are left untouched.
    """

    def replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in values:
            return str(values[name])
        return match.group(0)

    return _INTERPOLATION_PATTERN.sub(replace, template)


def _deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = value


def _pluralize(entry: Mapping[str, Any], values: Mapping[str, Any]) -> Optional[str]:
    if "count" not in values:
        return None
    count = values["count"]
    if count == 0 and "zero" in entry:
        return entry["zero"]
    if count == 1 and "one" in entry:
        return entry["one"]
    return entry.get("other")


class TranslationManager:
    """
    Manager for handling translations across multiple locales.

    Translations are nested JSON documents, one ``<locale>.json`` file per
    locale and directory. Keys are addressed with dots, e.g.
    ``errors.messages.blank``.
    """

    def __init__(
        self,
        translations_dirs: Optional[Sequence[Union[str, Path]]] = None,
        default_locale: str = "en",
        supported_locales: Optional[List[str]] = None,
        load_builtin: bool = True,
        raise_on_missing: bool = False,
        full_message_format: str = "{attribute} {message}",
    ):
        """
        Initialize the translation manager.

        Args:
            translations_dirs: Directories containing translation files, later
                directories override earlier ones
            default_locale: Default locale code
            supported_locales: List of supported locale codes
            load_builtin: Load the bundled English messages first
            raise_on_missing: Ask callers to propagate missing translations
            full_message_format: Pattern used when ``errors.format`` is not translated
        """
        dirs = [Path(d) for d in (translations_dirs or [])]
        if load_builtin:
            dirs.insert(0, BUILTIN_TRANSLATIONS_DIR)
        self.translations_dirs = dirs
        self.default_locale = default_locale
        self.supported_locales = list(supported_locales or [default_locale])
        if default_locale not in self.supported_locales:
            self.supported_locales.insert(0, default_locale)
        self.raise_on_missing = raise_on_missing
        self.full_message_format = full_message_format

        # Nested translation data per locale
        self.translations: Dict[str, Dict[str, Any]] = {}

        self._load_translations()

    def _load_translations(self) -> None:
        """Load translations for all supported locales."""
        for locale in self.supported_locales:
            data: Dict[str, Any] = {}
            for directory in self.translations_dirs:
                json_path = directory / f"{locale}.json"
                if not json_path.exists():
                    continue
                try:
                    with open(json_path, "r", encoding="utf-8") as f:
                        _deep_merge(data, json.load(f))
                    logger.debug(f"Loaded translations for {locale} from {json_path}")
                except (json.JSONDecodeError, OSError) as e:
                    logger.error(f"Error loading translations for {locale}: {e}")

            if not data:
                logger.warning(f"No translations found for {locale}")
            self.translations[locale] = data

    def store_translations(self, locale: str, data: Mapping[str, Any]) -> None:
        """
        Merge translation data into a locale at runtime.

        Args:
            locale: Locale code
            data: Nested translation mapping
        """
        if locale not in self.supported_locales:
            self.supported_locales.append(locale)
        _deep_merge(self.translations.setdefault(locale, {}), data)

    def lookup(self, key: str, locale: str) -> Optional[Any]:
        """
        Look up a dotted key in one locale.

        Returns:
            The stored string or nested mapping, or None when missing
        """
        node: Any = self.translations.get(locale)
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node

    def exists(self, key: str, locale: Optional[str] = None) -> bool:
        """Check whether a key resolves in the locale or its fallbacks."""
        return any(self.lookup(key, loc) is not None for loc in self.locale_chain(locale))

    def locale_chain(self, locale: Optional[str] = None) -> List[str]:
        """
        Build the fallback chain for a locale.

        The chain is the locale itself, its language code (``pt-BR`` gives
        ``pt``) and the default locale.
        """
        locale = locale or get_locale() or self.default_locale
        chain = [locale]
        language = locale.split("-")[0]
        if language not in chain:
            chain.append(language)
        if self.default_locale not in chain:
            chain.append(self.default_locale)
        return chain

    def translate(
        self,
        keys: Union[str, Sequence[str]],
        values: Optional[Mapping[str, Any]] = None,
        default: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str:
        """
        Translate the first resolvable key.

        Every key is tried in every locale of the fallback chain before the
        literal ``default`` is used.

        Args:
            keys: One dotted key or an ordered list of keys
            values: Interpolation values; ``count`` also selects plural forms
            default: Literal message used when no key resolves
            locale: The locale to translate to, defaults to the current locale

        Returns:
            The translated and interpolated message

        Raises:
            MissingTranslationError: No key resolves and no default is given
        """
        if isinstance(keys, str):
            keys = [keys]
        values = values or {}
        chain = self.locale_chain(locale)

        for loc in chain:
            for key in keys:
                entry = self.lookup(key, loc)
                if isinstance(entry, Mapping):
                    entry = _pluralize(entry, values)
                if isinstance(entry, str):
                    return interpolate(entry, values)

        if default is not None:
            return interpolate(default, values)

        raise MissingTranslationError(keys, chain[0])


_default_translator: Optional[Translator] = None


def build_translator(settings: Any = None) -> TranslationManager:
    """
    Create a translation manager from settings.

    Args:
        settings: Settings object, loaded with ``get_settings`` when omitted
    """
    if settings is None:
        from modelerrors.config import get_settings

        settings = get_settings()

    return TranslationManager(
        translations_dirs=settings.TRANSLATIONS_DIRS,
        default_locale=settings.DEFAULT_LOCALE,
        supported_locales=settings.SUPPORTED_LOCALES,
        raise_on_missing=settings.RAISE_ON_MISSING_TRANSLATIONS,
        full_message_format=settings.FULL_MESSAGE_FORMAT,
    )


def get_translator() -> Translator:
    """Get the process-wide translator, building it from settings on first use."""
    global _default_translator
    if _default_translator is None:
        _default_translator = build_translator()
    return _default_translator


def set_translator(translator: Optional[Translator]) -> None:
    """
    Replace the process-wide translator.

    Passing None makes the next ``get_translator`` call rebuild it from settings.
    """
    global _default_translator
    _default_translator = translator
