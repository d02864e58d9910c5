"""Translation service for retrieving and interpolating translated messages.

Lookups never raise: a missing message falls back to the default language
and finally to the key itself.
"""

import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from infrastructure.logging import get_module_logger
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    LanguageConfig,
    MessageValue,
    TranslationCatalog,
    TranslationKey,
)

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")

KeyInput = Union[str, TranslationKey]


class Translator:
    """Service for translating messages with placeholder interpolation.

    Manages catalogs for the supported languages and resolves keys through
    the fallback chain: requested language, default language, literal key.

    Attributes:
        loader: TranslationLoader for loading translation tables.
        config: Supported languages and default language.
        catalogs: Loaded TranslationCatalogs by language tag.
    """

    def __init__(self, loader: TranslationLoader, config: LanguageConfig):
        """Initialize Translator.

        Args:
            loader: TranslationLoader instance for loading translations.
            config: Language configuration; its default language is the
                fallback for missing keys.
        """
        self.loader = loader
        self.config = config
        self.catalogs: Dict[str, TranslationCatalog] = {}
        logger.info("initialized_translator", default_language=config.default_language)

    @property
    def default_language(self) -> str:
        return self.config.default_language

    def load_all(self) -> None:
        """Load every supported language.

        Languages without translation files get an empty catalog.
        """
        for language in self.config.supported_languages:
            self.load_language(language)
        logger.info("loaded_all_translations", language_count=len(self.catalogs))

    def load_language(self, language: str) -> None:
        """Load a specific language from the loader.

        A language with no translations is stored as an empty catalog, so
        every key of it resolves through the fallback chain.

        Args:
            language: Language tag to load.
        """
        try:
            self.catalogs[language] = self.loader.load(language)
        except FileNotFoundError:
            logger.warning("could_not_load_language", language=language)
            self.catalogs[language] = TranslationCatalog(language=language)
            return
        logger.info("loaded_language_translations", language=language)

    def _lookup(self, language: str, key: TranslationKey) -> Optional[MessageValue]:
        catalog = self.catalogs.get(language)
        return catalog.lookup(key) if catalog else None

    def _resolve_value(self, key: TranslationKey, language: str) -> Optional[MessageValue]:
        value = self._lookup(language, key)

        if value is None and language != self.default_language:
            value = self._lookup(self.default_language, key)
            if value is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=str(key),
                    requested_language=language,
                    fallback_language=self.default_language,
                )
        return value

    def translate(
        self,
        key: KeyInput,
        language: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Resolution:
        1. Message in the requested language
        2. Message in the default language
        3. The key itself

        A list-valued message resolves to its first item ("" when empty).
        String messages have {name} placeholders replaced from params.

        Args:
            key: Dotted key ("dialog.title") or TranslationKey.
            language: Language to translate to.
            params: Optional placeholder values for interpolation.

        Returns:
            Translated string; never None.
        """
        key = TranslationKey.coerce(key)
        value = self._resolve_value(key, language)

        if value is None:
            logger.warning(
                "translation_not_found",
                key=str(key),
                language=language,
                fallback_language=self.default_language,
            )
            return str(key)

        if isinstance(value, list):
            return value[0] if value else ""

        if params:
            return self._interpolate(value, params)
        return value

    def get_all(self, key: KeyInput, language: str) -> List[str]:
        """Retrieve a list-valued message without reducing it.

        Falls back to the default language when the requested language has
        no list under key.

        Returns:
            The list of strings, or an empty list if neither language has one.
        """
        key = TranslationKey.coerce(key)
        value = self._lookup(language, key)
        if not isinstance(value, list) and language != self.default_language:
            value = self._lookup(self.default_language, key)
        return list(value) if isinstance(value, list) else []

    def get_taglines(self, language: str) -> List[str]:
        """Rotating taglines of a language."""
        return self.get_all("taglines", language)

    def bind(self, language: str) -> Callable[..., str]:
        """Return a translate function bound to one language.

        Example:
            t = translator.bind("nb")
            t("nav.home")
            t("greeting", {"name": "Ada"})
        """

        def t(key: KeyInput, params: Optional[Mapping[str, Any]] = None) -> str:
            return self.translate(key, language, params)

        return t

    def has_message(self, key: KeyInput, language: str) -> bool:
        """Check if a translation exists for key in the requested language only."""
        catalog = self.catalogs.get(language)
        return catalog.has_message(key) if catalog else False

    def get_available_languages(self) -> List[str]:
        """Get list of loaded language tags."""
        return list(self.catalogs.keys())

    def get_catalog(self, language: str) -> Optional[TranslationCatalog]:
        """Get complete catalog for a language, or None if not loaded."""
        return self.catalogs.get(language)

    def get_table(self, language: str) -> Dict[str, Any]:
        """Get the raw nested table of a language.

        Supported languages are loaded on first access. Unknown languages
        yield the default language's table, or an empty table when that is
        not available either.
        """
        if self.config.is_supported(language) and language not in self.catalogs:
            self.load_language(language)
        catalog = self.catalogs.get(language) or self.catalogs.get(self.default_language)
        return catalog.messages if catalog else {}

    def _interpolate(self, message: str, params: Mapping[str, Any]) -> str:
        """Replace {name} placeholders with values from params.

        Substitution is a single pass: inserted values are not scanned for
        further placeholders. Placeholders without a value are left as-is.

        Args:
            message: Message string with {name} placeholders.
            params: Mapping of placeholder name to value.

        Returns:
            Message with placeholders replaced.
        """

        def _replace(match: "re.Match[str]") -> str:
            name = match.group(1)
            if name in params:
                return str(params[name])
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(_replace, message)

    def reload(self) -> None:
        """Reload all translations from loader."""
        self.catalogs.clear()
        clear_cache = getattr(self.loader, "clear_cache", None)
        if clear_cache:
            clear_cache()
        self.load_all()
        logger.info("reloaded_all_translations")


def pick(
    translations: Mapping[str, str],
    language: str,
    fallback_language: str,
) -> str:
    """Choose a text from an inline {language: text} mapping.

    Resolution: requested language, fallback language, first value.

    Example:
        pick({"no": "Hei", "en": "Hi"}, "en", "no")  # "Hi"

    Returns:
        The chosen text, or "" for an empty mapping.
    """
    text = translations.get(language) or translations.get(fallback_language)
    if text:
        return text
    return next(iter(translations.values()), "")
