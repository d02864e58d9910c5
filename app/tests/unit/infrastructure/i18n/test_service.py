"""Tests for infrastructure.i18n.service module."""

import pytest

from infrastructure.i18n import (
    DetectionMode,
    InMemoryStorage,
    LanguageLink,
    TranslationService,
)
from tests.factories.i18n import make_language_signals


@pytest.fixture
def service(translator):
    """Path-mode translation service."""
    return TranslationService(translator)


@pytest.fixture
def query_service(translator):
    """Query-mode translation service."""
    return TranslationService(translator, detection_mode="query")


class TestTranslationService:
    """Tests for TranslationService facade."""

    def test_detection_mode_from_string(self, query_service):
        """String detection modes are converted."""
        assert query_service.detection_mode == DetectionMode.QUERY

    def test_invalid_detection_mode(self, translator):
        """Unknown detection modes are rejected."""
        with pytest.raises(ValueError):
            TranslationService(translator, detection_mode="header")

    def test_translator_property(self, service, translator):
        """translator exposes the underlying Translator."""
        assert service.translator is translator

    def test_detect_language_uses_configured_mode(self, service, query_service):
        """detect_language() defaults to the configured mode."""
        signals = make_language_signals(path="/nb/about", query={"lang": "nl"})
        assert service.detect_language(signals) == "nb"
        assert query_service.detect_language(signals) == "nl"

    def test_detect_language_mode_override(self, service):
        """An explicit mode overrides the configured one."""
        signals = make_language_signals(path="/nb/about", query={"lang": "nl"})
        assert service.detect_language(signals, mode=DetectionMode.QUERY) == "nl"

    def test_detect_language_with_storage(self, service):
        """Storage is consulted when no explicit signal matches."""
        storage = InMemoryStorage({"language": "nl"})
        signals = make_language_signals(path="/about")
        assert service.detect_language(signals, storage=storage) == "nl"

    def test_set_language(self, service, storage):
        """set_language() stores the preference and rewrites the URL."""
        assert service.set_language("nb", storage, "/about") == "/about?lang=nb"
        assert storage.get("language") == "nb"

    def test_translate_and_get_all(self, service):
        """translate() and get_all() delegate to the translator."""
        assert service.translate("greeting", "nb", {"name": "Ada"}) == "Hei Ada"
        assert service.get_all("taglines", "nl") == ["A", "B", "C"]

    def test_localize_url_uses_default(self, service):
        """localize_url() uses the configured default language."""
        assert service.localize_url("/about", "nb", "en") == "/nb/about"
        assert service.localize_url("/nb/about", "en", "nb") == "/about"

    def test_switch_url_path_mode(self, service):
        """Path mode switches by prefix."""
        assert service.switch_url("/nb/about", "nl", "nb") == "/nl/about"

    def test_switch_url_query_mode(self, query_service):
        """Query mode switches by query parameter."""
        assert query_service.switch_url("/about?lang=nb", "nl", "nb") == "/about?lang=nl"

    def test_language_links(self, service):
        """language_links() lists every language for the current page."""
        links = service.language_links("/nb/about", "nb")

        assert links == [
            LanguageLink(language="en", name="English", url="/about", current=False),
            LanguageLink(language="nb", name="Norsk", url="/nb/about", current=True),
            LanguageLink(language="nl", name="Nederlands", url="/nl/about", current=False),
        ]

    def test_get_available_languages(self, service):
        """get_available_languages() returns display names."""
        assert service.get_available_languages() == {
            "en": "English",
            "nb": "Norsk",
            "nl": "Nederlands",
        }
