"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_language_config,
    make_language_signals,
    make_translation_catalog,
    make_translation_tables,
    make_translator,
)

__all__ = [
    "make_language_config",
    "make_language_signals",
    "make_translation_catalog",
    "make_translation_tables",
    "make_translator",
]
