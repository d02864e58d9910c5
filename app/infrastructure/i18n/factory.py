"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with default
configurations suitable for the application.
"""

from pathlib import Path
from typing import Iterable, Optional

from infrastructure.logging import get_module_logger
from infrastructure.configuration import I18nSettings
from infrastructure.i18n.loader import (
    FileTranslationLoader,
    JSONTranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import LanguageConfig
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.translator import Translator

logger = get_module_logger()

LOADERS = {
    "json": JSONTranslationLoader,
    "yaml": YAMLTranslationLoader,
    "yml": YAMLTranslationLoader,
}


def default_translations_dir() -> Path:
    """Bundled locales directory (app/locales)."""
    # This file is at .../app/infrastructure/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def create_loader(
    translations_dir: Optional[Path] = None,
    translations_format: str = "json",
    use_cache: bool = True,
    languages: Optional[Iterable[str]] = None,
) -> FileTranslationLoader:
    """Create a file loader for the given format.

    Raises:
        ValueError: If the format is unknown or the directory does not exist.
    """
    loader_class = LOADERS.get(translations_format.lower())
    if loader_class is None:
        raise ValueError(f"Unsupported translations format: {translations_format}")
    return loader_class(
        translations_dir=translations_dir or default_translations_dir(),
        use_cache=use_cache,
        languages=languages,
    )


def create_translator(
    config: Optional[LanguageConfig] = None,
    translations_dir: Optional[Path] = None,
    translations_format: str = "json",
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    If no translations_dir is provided, the bundled app/locales directory
    is used.

    Args:
        config: Language configuration (default: from environment settings)
        translations_dir: Path to translation files (default: app/locales)
        translations_format: "json" or "yaml" (default: json)
        use_cache: Whether loader should cache parsed files (default: True)
        preload: Whether to load all languages immediately (default: True)

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist or format is unknown

    Usage:
        # Use defaults (bundled locales, preload all)
        translator = create_translator()

        # Lazy loading
        translator = create_translator(preload=False)
        translator.load_language("nb")
    """
    if config is None:
        config = LanguageConfig.from_settings(I18nSettings())

    translations_dir = translations_dir or default_translations_dir()
    loader = create_loader(
        translations_dir=translations_dir,
        translations_format=translations_format,
        use_cache=use_cache,
        languages=config.supported_languages,
    )
    translator = Translator(loader=loader, config=config)

    if preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            language_count=len(translator.get_available_languages()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
        )

    return translator


def create_translation_service(
    settings: Optional[I18nSettings] = None,
    preload: bool = True,
) -> TranslationService:
    """Create a TranslationService from I18nSettings.

    Args:
        settings: I18n settings (default: loaded from environment)
        preload: Whether to load all languages immediately

    Returns:
        TranslationService: Configured service
    """
    settings = settings or I18nSettings()
    config = LanguageConfig.from_settings(settings)
    translator = create_translator(
        config=config,
        translations_dir=settings.translations_dir,
        translations_format=settings.translations_format,
        preload=preload,
    )
    return TranslationService(
        translator=translator,
        detection_mode=settings.detection_mode,
    )
