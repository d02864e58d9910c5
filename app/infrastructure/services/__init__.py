"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    TranslationServiceDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_translation_service,
)

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
    "get_settings",
    "get_translation_service",
]
