"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the site
using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Language detection and translation settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    default_language = settings.i18n.default_language
    supported = list(settings.i18n.languages)

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings"]
