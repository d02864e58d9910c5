"""Translation models for i18n system.

Defines the language configuration, translation catalogs and the signals
used to detect the active language of a request.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

# A leaf of a translation table: a message or an ordered list of messages.
MessageValue = Union[str, List[str]]


class DetectionMode(str, Enum):
    """Where an explicit language signal is read from.

    Path-based and query-based detection are independent modes, never
    combined within one resolution.
    """

    PATH = "path"
    QUERY = "query"

    @classmethod
    def from_string(cls, mode_str: str) -> "DetectionMode":
        """Convert string to DetectionMode enum.

        Args:
            mode_str: Mode string ("path" or "query").

        Returns:
            Matching DetectionMode value.

        Raises:
            ValueError: If mode string is not supported.
        """
        try:
            return cls(mode_str.lower())
        except ValueError as e:
            raise ValueError(f"Unsupported detection mode: {mode_str}") from e


@dataclass(frozen=True)
class LanguageConfig:
    """Closed set of supported language tags and the default tag.

    Attributes:
        languages: Ordered mapping of language tag to display name.
        default_language: Fallback tag, always a member of languages.
        query_param: Query parameter carrying an explicit language.
        storage_key: Key of the persisted language preference.
    """

    languages: Mapping[str, str]
    default_language: str
    query_param: str = "lang"
    storage_key: str = "language"

    def __post_init__(self):
        if not self.languages:
            raise ValueError("At least one supported language is required")
        if self.default_language not in self.languages:
            raise ValueError(
                f"Default language {self.default_language!r} is not one of "
                f"the supported languages: {', '.join(self.languages)}"
            )
        # Detach from the caller's mapping.
        object.__setattr__(self, "languages", dict(self.languages))

    @property
    def supported_languages(self) -> Tuple[str, ...]:
        """Supported tags in configuration order."""
        return tuple(self.languages)

    def is_supported(self, tag: Optional[str]) -> bool:
        """Check whether tag is a member of the supported set.

        Args:
            tag: Candidate language tag, possibly None.

        Returns:
            True only for exact members of the configured set.
        """
        return isinstance(tag, str) and tag in self.languages

    def display_name(self, tag: str) -> str:
        """Human-readable name of a language, or the tag itself when unknown."""
        return self.languages.get(tag, tag)

    @classmethod
    def from_settings(cls, settings) -> "LanguageConfig":
        """Build a LanguageConfig from I18nSettings.

        Args:
            settings: I18nSettings instance.

        Returns:
            LanguageConfig instance.

        Raises:
            ValueError: If the default language is not supported.
        """
        return cls(
            languages=settings.languages,
            default_language=settings.default_language,
            query_param=settings.query_param,
            storage_key=settings.storage_key,
        )


@dataclass(frozen=True)
class TranslationKey:
    """Represents a dotted translation key (e.g. "dialog.title").

    Frozen to ensure immutability and hashability for caching.

    Attributes:
        parts: Path segments, one per nesting level.
    """

    parts: Tuple[str, ...]

    def __str__(self) -> str:
        """Return full dot-separated key path."""
        return ".".join(self.parts)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a dot-separated string.

        "a.b.c" becomes ("a", "b", "c"); a key without dots has one part.
        """
        return cls(parts=tuple(key_string.split(".")))

    @classmethod
    def coerce(cls, key: Union[str, "TranslationKey"]) -> "TranslationKey":
        """Accept either a TranslationKey or its string form."""
        if isinstance(key, TranslationKey):
            return key
        return cls.from_string(key)


def _descend(messages: Mapping[str, Any], parts: Tuple[str, ...]) -> Optional[Any]:
    """Walk a nested table one segment at a time.

    Any structural mismatch (a non-mapping before the last segment, or a
    missing segment) yields None.
    """
    value: Any = messages
    for part in parts:
        if not isinstance(value, Mapping):
            return None
        if part not in value:
            return None
        value = value[part]
    return value


def _as_leaf(value: Any) -> Optional[MessageValue]:
    """Normalize a raw table value into a message leaf.

    Strings and lists are leaves. Other scalars (numbers, booleans) are
    rendered as strings. Nested mappings, None and empty strings are not
    messages.
    """
    if value is None or isinstance(value, Mapping):
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return str(value)


def _deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    """Recursively merge source into target; later entries override earlier."""
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            _deep_merge(existing, value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = value


@dataclass
class TranslationCatalog:
    """Container for the translation table of one language.

    Attributes:
        language: The language tag this catalog is for.
        messages: Nested dict; leaves are strings or lists of strings.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    language: str
    messages: Dict[str, Any] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def lookup(self, key: Union[str, TranslationKey]) -> Optional[MessageValue]:
        """Find the message leaf for a key.

        Nested descent is tried first. Tables written with flat dotted keys
        (``{"nav.home": "Home"}``) are matched on the full key after that.

        Args:
            key: Dotted key or TranslationKey.

        Returns:
            A string or list of strings, or None if not found.
        """
        key = TranslationKey.coerce(key)
        value = _as_leaf(_descend(self.messages, key.parts))
        if value is None and len(key.parts) > 1:
            value = _as_leaf(self.messages.get(str(key)))
        return value

    def has_message(self, key: Union[str, TranslationKey]) -> bool:
        """Check if a translation leaf exists for the given key."""
        return self.lookup(key) is not None

    def merge(self, other: Union["TranslationCatalog", Mapping[str, Any]]) -> None:
        """Deep-merge another catalog (or raw table) into this one.

        Later entries override earlier ones.
        """
        source = other.messages if isinstance(other, TranslationCatalog) else other
        _deep_merge(self.messages, source)


@dataclass
class LanguageSignals:
    """Ambient signals available for detecting the active language.

    Attributes:
        path: URL path (or full URL) of the current page.
        query: Query parameters, as a mapping or a raw query string.
        stored: Previously stored preference. When None the detector
            reads its preference storage instead.
    """

    path: Optional[str] = None
    query: Optional[Union[Mapping[str, Any], str]] = None
    stored: Optional[str] = None
