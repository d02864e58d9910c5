"""Feature-level fixtures for i18n system tests.

Provides translation files, translators and storage for language resolution
and translation scenarios.
"""

import json

import pytest
import yaml

from infrastructure.i18n import InMemoryStorage, JSONTranslationLoader, YAMLTranslationLoader
from tests.factories.i18n import make_language_config, make_translator


@pytest.fixture
def language_config():
    """Language configuration with en (default), nb and nl."""
    return make_language_config()


@pytest.fixture
def translator():
    """Translator preloaded with in-memory tables."""
    return make_translator()


@pytest.fixture
def storage():
    """Empty in-memory preference storage."""
    return InMemoryStorage()


@pytest.fixture
def json_translations_dir(tmp_path):
    """Create temporary directory with sample JSON translation files.

    Returns a directory structure like:
    - en.json
    - pages.en.json
    - nb.json
    """
    en = {
        "nav": {"home": "Home"},
        "dialog": {"title": "Choose your language"},
        "taglines": ["Calm software", "Small tools"],
    }
    with open(tmp_path / "en.json", "w", encoding="utf-8") as f:
        json.dump(en, f)

    en_pages = {
        "nav": {"about": "About"},
        "about": {"heading": "About {name}"},
    }
    with open(tmp_path / "pages.en.json", "w", encoding="utf-8") as f:
        json.dump(en_pages, f)

    nb = {
        "nav": {"home": "Hjem"},
        "dialog": {"title": "Velg språk"},
    }
    with open(tmp_path / "nb.json", "w", encoding="utf-8") as f:
        json.dump(nb, f, ensure_ascii=False)

    return tmp_path


@pytest.fixture
def yaml_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - site.en.yml
    - site.nl.yaml
    """
    with open(tmp_path / "site.en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"nav": {"home": "Home", "contact": "Contact"}}, f)

    with open(tmp_path / "site.nl.yaml", "w", encoding="utf-8") as f:
        yaml.dump({"nav": {"contact": "Contact opnemen"}}, f)

    return tmp_path


@pytest.fixture
def json_loader(json_translations_dir):
    """Create JSONTranslationLoader for temporary translations directory."""
    return JSONTranslationLoader(json_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader(yaml_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(yaml_translations_dir, use_cache=False)
