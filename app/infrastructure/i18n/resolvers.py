"""Language resolution logic for determining the active language.

Provides the detector that resolves a language tag from ambient signals
(URL path, query parameter, stored preference) and the setter that records
a chosen language.
"""

from typing import Any, Mapping, Optional, Union
from urllib.parse import parse_qs, urlsplit

from infrastructure.logging import get_module_logger
from infrastructure.i18n.models import DetectionMode, LanguageConfig, LanguageSignals
from infrastructure.i18n.storage import NullStorage, PreferenceStorage
from infrastructure.i18n.urls import first_path_segment, with_query_param

logger = get_module_logger()

QueryInput = Union[Mapping[str, Any], str, None]


def _query_value(query: QueryInput, name: str) -> Optional[str]:
    """Read a single query parameter from a mapping or raw query string."""
    if query is None:
        return None
    if isinstance(query, str):
        values = parse_qs(query.lstrip("?")).get(name)
        return values[0] if values else None
    value = query.get(name)
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


class LanguageDetector:
    """Resolves the active language from context signals.

    Implements the fallback chain (first valid match wins):
    1. Explicit URL path segment (path mode) or query parameter (query mode)
    2. Stored preference
    3. Default language

    Invalid or unknown tags are treated as "no match", never as errors.
    """

    def __init__(
        self,
        config: LanguageConfig,
        storage: Optional[PreferenceStorage] = None,
    ):
        """Initialize language detector.

        Args:
            config: Supported languages and default language.
            storage: Preference storage, NullStorage when not provided.
        """
        self.config = config
        self.storage = storage or NullStorage()
        self.log = logger.bind(default_language=config.default_language)

    def match_path(self, path: Optional[str]) -> Optional[str]:
        """Return the first path segment if it is a supported language."""
        segment = first_path_segment(path)
        return segment if self.config.is_supported(segment) else None

    def match_query(self, query: QueryInput) -> Optional[str]:
        """Return the language query parameter if it is supported."""
        value = _query_value(query, self.config.query_param)
        return value if self.config.is_supported(value) else None

    def match_stored(self, stored: Optional[str] = None) -> Optional[str]:
        """Return the stored preference if it is supported.

        Args:
            stored: Preference value already at hand. Storage is read
                only when this is None.
        """
        if stored is None:
            stored = self.storage.get(self.config.storage_key)
        return stored if self.config.is_supported(stored) else None

    def resolve(
        self,
        signals: Optional[LanguageSignals] = None,
        mode: DetectionMode = DetectionMode.PATH,
    ) -> str:
        """Resolve the best matching language from available signals.

        Args:
            signals: Path, query and stored preference signals.
            mode: Whether the explicit signal is the path or the query.

        Returns:
            A supported language tag; the default when nothing matches.
        """
        signals = signals or LanguageSignals()

        if mode == DetectionMode.QUERY:
            explicit = self.match_query(signals.query)
        else:
            explicit = self.match_path(signals.path)

        if explicit:
            self.log.debug("resolved_language", language=explicit, source=mode.value)
            return explicit

        stored = self.match_stored(signals.stored)
        if stored:
            self.log.debug("resolved_language", language=stored, source="storage")
            return stored

        return self.config.default_language

    def resolve_from_path(self, path: Optional[str]) -> str:
        """Resolve language from the first path segment only.

        Accepts a path or a full URL; storage is not consulted.
        """
        return self.match_path(path) or self.config.default_language

    def resolve_current(self, query: QueryInput = None) -> str:
        """Resolve language from query parameter, then stored preference."""
        return self.resolve(LanguageSignals(query=query), mode=DetectionMode.QUERY)

    def resolve_build_time(self, url: Optional[str] = None) -> str:
        """Resolve language from an optional URL's query parameter.

        Used when rendering ahead of time, where no stored preference
        exists.
        """
        if url:
            lang = self.match_query(urlsplit(url).query)
            if lang:
                return lang
        return self.config.default_language


class LanguageSetter:
    """Records a chosen language.

    Writes the tag into preference storage and, when given the current URL,
    returns it rewritten to carry the tag as a query parameter. Intended for
    a single writer per session.
    """

    def __init__(self, config: LanguageConfig, storage: PreferenceStorage):
        self.config = config
        self.storage = storage

    def set_language(self, lang: str, url: Optional[str] = None) -> Optional[str]:
        """Store lang as the preferred language.

        Args:
            lang: Supported language tag.
            url: Optional current URL to rewrite.

        Returns:
            url with its language query parameter set to lang, or None when
            no url was given.

        Raises:
            ValueError: If lang is not a supported language.
        """
        if not self.config.is_supported(lang):
            logger.warning("unsupported_language", language=lang)
            raise ValueError(f"Unsupported language: {lang}")

        self.storage.set(self.config.storage_key, lang)
        logger.info("language_set", language=lang)

        if url is None:
            return None
        return with_query_param(url, self.config.query_param, lang)
