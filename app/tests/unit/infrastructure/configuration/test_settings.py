"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- I18nSettings validation and defaults
- Settings class initialization
- Integration with Pydantic BaseSettings
"""

import pytest

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.i18n import LanguageConfig
from infrastructure.services.providers import get_settings


class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_i18n_settings_defaults(self):
        """Test I18nSettings uses correct default values."""
        i18n = I18nSettings()

        assert i18n.languages == {"en": "English", "nb": "Norsk", "nl": "Nederlands"}
        assert i18n.default_language == "en"
        assert i18n.translations_dir is None
        assert i18n.translations_format == "json"
        assert i18n.query_param == "lang"
        assert i18n.storage_key == "language"
        assert i18n.detection_mode == "path"
        assert i18n.cookie_max_age_seconds == 31536000

    def test_i18n_settings_custom_values(self, monkeypatch, tmp_path):
        """Test I18nSettings accepts custom configuration."""
        monkeypatch.setenv("I18N_LANGUAGES", '{"no": "Norsk", "en": "English"}')
        monkeypatch.setenv("I18N_DEFAULT_LANGUAGE", "no")
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", str(tmp_path))
        monkeypatch.setenv("I18N_TRANSLATIONS_FORMAT", "YAML")
        monkeypatch.setenv("I18N_QUERY_PARAM", "hl")
        monkeypatch.setenv("I18N_STORAGE_KEY", "site-language")
        monkeypatch.setenv("I18N_DETECTION_MODE", "Query")
        monkeypatch.setenv("I18N_COOKIE_MAX_AGE_SECONDS", "3600")

        i18n = I18nSettings()

        assert list(i18n.languages) == ["no", "en"]
        assert i18n.default_language == "no"
        assert i18n.translations_dir == tmp_path
        assert i18n.translations_format == "yaml"
        assert i18n.query_param == "hl"
        assert i18n.storage_key == "site-language"
        assert i18n.detection_mode == "query"
        assert i18n.cookie_max_age_seconds == 3600

    def test_language_config_from_settings(self, monkeypatch):
        """LanguageConfig is built from I18nSettings."""
        monkeypatch.setenv("I18N_LANGUAGES", '{"no": "Norsk", "en": "English"}')
        monkeypatch.setenv("I18N_DEFAULT_LANGUAGE", "no")

        config = LanguageConfig.from_settings(I18nSettings())

        assert config.supported_languages == ("no", "en")
        assert config.default_language == "no"
        assert config.display_name("en") == "English"

    def test_language_config_rejects_unknown_default(self, monkeypatch):
        """A default language outside the configured set is rejected."""
        monkeypatch.setenv("I18N_DEFAULT_LANGUAGE", "de")

        with pytest.raises(ValueError):
            LanguageConfig.from_settings(I18nSettings())


class TestSettings:
    """Test suite for main Settings class."""

    def test_settings_initialization(self):
        """Test Settings initializes with all sub-settings."""
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_settings_override_section(self):
        """Explicit sub-settings are used as given."""
        i18n = I18nSettings()
        settings = Settings(i18n=i18n)

        assert settings.i18n is i18n

    def test_is_production_property(self, monkeypatch):
        """Test is_production property based on PREFIX."""
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_get_settings_is_cached(self):
        """get_settings() returns one instance per process."""
        assert get_settings() is get_settings()


class TestI18nSettingsByFieldName:
    """I18nSettings accepts field names as well as environment aliases."""

    def test_construct_by_field_name(self):
        """Values passed by field name are used."""
        i18n = I18nSettings(default_language="nb", detection_mode="QUERY")

        assert i18n.default_language == "nb"
        assert i18n.detection_mode == "query"
