"""Internationalization feature settings."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Configuration for language detection and translation lookup.

    Environment Variables:
        I18N_LANGUAGES: JSON dict of supported language tags to display names
        I18N_DEFAULT_LANGUAGE: Tag used when no signal matches (default: en)
        I18N_TRANSLATIONS_DIR: Directory holding translation tables
            (default: the bundled app/locales directory)
        I18N_TRANSLATIONS_FORMAT: 'json' or 'yaml' (default: json)
        I18N_QUERY_PARAM: Query parameter carrying the language (default: lang)
        I18N_STORAGE_KEY: Key of the stored language preference (default: language)
        I18N_DETECTION_MODE: 'path' or 'query' (default: path)
        I18N_COOKIE_MAX_AGE_SECONDS: Lifetime of the preference cookie
            (default: 31536000 = 1 year)

    Languages Configuration (I18N_LANGUAGES):
        Schema:
            {
                "en": "English",
                "nb": "Norsk",
                "nl": "Nederlands"
            }

        The order of the mapping is the order languages are offered in
        language switchers.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.i18n.detection_mode == "query":
            param = settings.i18n.query_param
        ```
    """

    languages: Dict[str, str] = Field(
        default_factory=lambda: {"en": "English", "nb": "Norsk", "nl": "Nederlands"},
        alias="I18N_LANGUAGES",
        description="Supported language tags mapped to their display names",
    )
    default_language: str = Field(
        default="en",
        alias="I18N_DEFAULT_LANGUAGE",
        description="Fallback language tag, must be one of the supported languages",
    )
    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory with translation tables (None = bundled locales)",
    )
    translations_format: str = Field(
        default="json",
        alias="I18N_TRANSLATIONS_FORMAT",
        description="Translation file format: 'json' or 'yaml'",
    )
    query_param: str = Field(
        default="lang",
        alias="I18N_QUERY_PARAM",
        description="Query parameter used for query-based language detection",
    )
    storage_key: str = Field(
        default="language",
        alias="I18N_STORAGE_KEY",
        description="Key under which the language preference is stored",
    )
    detection_mode: str = Field(
        default="path",
        alias="I18N_DETECTION_MODE",
        description="Language detection mode: 'path' or 'query'",
    )
    cookie_max_age_seconds: int = Field(
        default=31536000,
        alias="I18N_COOKIE_MAX_AGE_SECONDS",
        description="Lifetime of the language preference cookie (seconds, 1 year)",
    )

    @field_validator("languages", mode="before")
    @classmethod
    def _parse_languages(cls, v: Optional[Any]) -> Any:
        """Parse I18N_LANGUAGES from JSON string or dict."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return v
        if isinstance(v, str):
            s = v.strip()
            if (s.startswith("'") and s.endswith("'")) or (
                s.startswith('"') and s.endswith('"')
            ):
                s = s[1:-1]
            try:
                return json.loads(s) if s else {}
            except (json.JSONDecodeError, ValueError) as e:
                raise ValueError(
                    f"Invalid I18N_LANGUAGES JSON: {e} (value: {s[:80]}...)"
                ) from e
        raise ValueError("I18N_LANGUAGES must be a JSON string or a mapping")

    @field_validator("translations_format", "detection_mode")
    @classmethod
    def _normalize_choice(cls, v: str) -> str:
        """Lower-case enumerated string settings."""
        return v.strip().lower()
