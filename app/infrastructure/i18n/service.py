"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from infrastructure.i18n.models import DetectionMode, LanguageConfig, LanguageSignals
from infrastructure.i18n.resolvers import LanguageDetector, LanguageSetter
from infrastructure.i18n.storage import PreferenceStorage
from infrastructure.i18n.translator import Translator
from infrastructure.i18n.urls import localize_url, with_query_param


@dataclass(frozen=True)
class LanguageLink:
    """Navigation entry for a language switcher."""

    language: str
    name: str
    url: str
    current: bool


class TranslationService:
    """Class-based translation service.

    Ties together language detection, translation lookup and URL
    localization for one configured set of languages. The service holds no
    per-request state; preference storage is passed per call.

    Usage:
        # Via dependency injection
        from infrastructure.services import TranslationServiceDep

        @router.get("/")
        def home(translation: TranslationServiceDep):
            lang = translation.detect_language(LanguageSignals(path="/nb/"))
            return {"title": translation.translate("home.title", lang)}

        # Direct instantiation
        service = TranslationService(translator)
        message = service.translate("nav.home", "nb")
    """

    def __init__(
        self,
        translator: Translator,
        detection_mode: Union[DetectionMode, str] = DetectionMode.PATH,
    ):
        """Initialize translation service.

        Args:
            translator: Configured Translator instance.
            detection_mode: Default detection mode for detect_language().
        """
        self._translator = translator
        if isinstance(detection_mode, str):
            detection_mode = DetectionMode.from_string(detection_mode)
        self.detection_mode = detection_mode

    @property
    def config(self) -> LanguageConfig:
        return self._translator.config

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator

    def detector(self, storage: Optional[PreferenceStorage] = None) -> LanguageDetector:
        """Create a detector reading preferences from storage."""
        return LanguageDetector(self.config, storage)

    def detect_language(
        self,
        signals: Optional[LanguageSignals] = None,
        mode: Optional[DetectionMode] = None,
        storage: Optional[PreferenceStorage] = None,
    ) -> str:
        """Resolve the active language; always a supported tag."""
        return self.detector(storage).resolve(signals, mode or self.detection_mode)

    def set_language(
        self,
        language: str,
        storage: PreferenceStorage,
        url: Optional[str] = None,
    ) -> Optional[str]:
        """Record language in storage; see LanguageSetter.set_language().

        Raises:
            ValueError: If language is not supported.
        """
        return LanguageSetter(self.config, storage).set_language(language, url)

    def translate(
        self,
        key: str,
        language: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message."""
        return self._translator.translate(key, language, params)

    def get_all(self, key: str, language: str) -> List[str]:
        """Retrieve a list-valued message."""
        return self._translator.get_all(key, language)

    def localize_url(self, path: str, target_language: str, current_language: str) -> str:
        """Path of the same page in target_language."""
        return localize_url(
            path, target_language, current_language, self.config.default_language
        )

    def switch_url(self, url: str, target_language: str, current_language: str) -> str:
        """URL of the same page in target_language for the detection mode.

        Path mode prefixes the path, query mode rewrites the language
        query parameter.
        """
        if self.detection_mode == DetectionMode.QUERY:
            return with_query_param(url, self.config.query_param, target_language)
        return self.localize_url(url, target_language, current_language)

    def language_links(self, url: str, current_language: str) -> List[LanguageLink]:
        """Links to the current page in every supported language."""
        return [
            LanguageLink(
                language=language,
                name=name,
                url=self.switch_url(url, language, current_language),
                current=language == current_language,
            )
            for language, name in self.config.languages.items()
        ]

    def get_available_languages(self) -> Dict[str, str]:
        """Supported languages mapped to display names."""
        return dict(self.config.languages)
