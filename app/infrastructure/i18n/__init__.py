"""i18n system - language detection and translation lookup.

Resolves the active language from URL path, query parameter or stored
preference, looks up messages in bundled translation tables with fallback
to the default language, and builds language-prefixed URLs.

Main components:
- models: LanguageConfig, TranslationKey, TranslationCatalog, LanguageSignals
- loader: TranslationLoader with JSON, YAML and in-memory implementations
- storage: PreferenceStorage with NullStorage and InMemoryStorage
- resolvers: LanguageDetector and LanguageSetter
- translator: Translator with fallback chain and interpolation
- urls: localize_url() and related path helpers
- service: TranslationService facade
- web: FastAPI cookie storage, request language dependency and router
"""

from infrastructure.i18n.loader import (
    DictTranslationLoader,
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import (
    DetectionMode,
    LanguageConfig,
    LanguageSignals,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.resolvers import LanguageDetector, LanguageSetter
from infrastructure.i18n.service import LanguageLink, TranslationService
from infrastructure.i18n.storage import InMemoryStorage, NullStorage, PreferenceStorage
from infrastructure.i18n.translator import Translator, pick
from infrastructure.i18n.urls import localize_url

__all__ = [
    "DetectionMode",
    "LanguageConfig",
    "LanguageSignals",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "DictTranslationLoader",
    "JSONTranslationLoader",
    "YAMLTranslationLoader",
    "PreferenceStorage",
    "NullStorage",
    "InMemoryStorage",
    "LanguageDetector",
    "LanguageSetter",
    "Translator",
    "pick",
    "localize_url",
    "TranslationService",
    "LanguageLink",
]
