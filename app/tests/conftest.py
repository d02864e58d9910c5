"""Shared fixtures for the test suite."""

import pytest

from infrastructure.services.providers import get_settings, get_translation_service


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset cached singletons so each test sees its own environment."""
    get_settings.cache_clear()
    get_translation_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_translation_service.cache_clear()
