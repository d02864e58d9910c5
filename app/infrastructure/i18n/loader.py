"""Translation loading interface and implementations.

Defines the contract for loading translation tables and provides JSON,
YAML and in-memory loaders.
"""

import json
from abc import ABC, abstractmethod
from copy import deepcopy
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import yaml

from infrastructure.logging import get_module_logger
from infrastructure.i18n.models import TranslationCatalog

logger = get_module_logger()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to obtain the translation table of a
    language.
    """

    @abstractmethod
    def load(self, language: str) -> TranslationCatalog:
        """Load translations for a specific language.

        Args:
            language: Language tag to load translations for.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no translations exist for the language.
            ValueError: If translation format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load translations for all available languages.

        Returns:
            Dict mapping language tag to TranslationCatalog.
        """
        pass


class DictTranslationLoader(TranslationLoader):
    """Loader for tables bundled in code.

    Attributes:
        tables: Mapping of language tag to nested translation table.
    """

    def __init__(self, tables: Mapping[str, Mapping[str, Any]]):
        self.tables = tables

    def load(self, language: str) -> TranslationCatalog:
        """Return a catalog holding a copy of the bundled table.

        Raises:
            FileNotFoundError: If no table is bundled for the language.
        """
        if language not in self.tables:
            raise FileNotFoundError(f"No bundled translations for {language}")
        return TranslationCatalog(
            language=language,
            messages=deepcopy(dict(self.tables[language])),
            loaded_at=_now(),
        )

    def load_all(self) -> Dict[str, TranslationCatalog]:
        return {language: self.load(language) for language in self.tables}


class FileTranslationLoader(TranslationLoader):
    """Base loader for per-language translation files.

    Expects files named <language><suffix> or <domain>.<language><suffix>
    in the translations directory. All files of one language are merged in
    sorted filename order.

    Attributes:
        translations_dir: Path to directory containing translation files.
        languages: Optional tags to restrict discovery to.
        cache: Cache of loaded catalogs (language -> catalog).
    """

    suffixes: Tuple[str, ...] = ()
    format_name = "file"

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
        languages: Optional[Iterable[str]] = None,
    ):
        """Initialize file translation loader.

        Args:
            translations_dir: Path to directory with translation files.
            use_cache: Whether to cache loaded catalogs in memory.
            languages: Restrict load_all() to these tags.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.languages = tuple(languages) if languages is not None else None
        self.cache: Dict[str, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_translation_loader",
            format=self.format_name,
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    @abstractmethod
    def _parse(self, handle) -> Any:
        """Parse an open file into Python data.

        Raises:
            ValueError: If the content cannot be parsed.
        """
        pass

    def _files_for(self, language: str) -> List[Path]:
        files = set()
        for suffix in self.suffixes:
            files.update(self.translations_dir.glob(f"{language}{suffix}"))
            files.update(self.translations_dir.glob(f"*.{language}{suffix}"))
        return sorted(files)

    def load(self, language: str) -> TranslationCatalog:
        """Load translations for a language from its files.

        Args:
            language: Language tag to load.

        Returns:
            TranslationCatalog with merged messages.

        Raises:
            FileNotFoundError: If no files exist for the language.
            ValueError: If parsing fails.
        """
        if self.use_cache and language in self.cache:
            logger.debug("loaded_from_cache", language=language)
            return self.cache[language]

        files = self._files_for(language)
        if not files:
            raise FileNotFoundError(
                f"No translation files found for language {language} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(language=language, loaded_at=_now())
        for path in files:
            with open(path, "r", encoding="utf-8") as f:
                try:
                    data = self._parse(f)
                except ValueError as e:
                    logger.error("translation_parse_error", file=str(path), error=str(e))
                    raise ValueError(f"Failed to parse {path}: {e}") from e
            if data:
                self._merge_data(catalog, data, path)

        logger.info(
            "loaded_translations",
            language=language,
            file_count=len(files),
            key_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[language] = catalog

        return catalog

    def available_languages(self) -> List[str]:
        """Detect languages from translation filenames."""
        found = set()
        for suffix in self.suffixes:
            for path in self.translations_dir.glob(f"*{suffix}"):
                # "en.json" -> "en", "home.en.json" -> "en"
                language = path.name[: -len(suffix)].split(".")[-1]
                if self.languages is not None and language not in self.languages:
                    continue
                found.add(language)
        return sorted(found)

    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load translations for all detected languages.

        Raises:
            ValueError: If no translation files are found at all.
        """
        languages = self.available_languages()
        if not languages:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        result = {}
        for language in languages:
            try:
                result[language] = self.load(language)
            except FileNotFoundError:
                logger.warning("could_not_load_language", language=language)

        return result

    def _merge_data(self, catalog: TranslationCatalog, data: Any, source_file: Path) -> None:
        """Merge parsed file content into catalog.

        Expected format is a mapping whose leaves are strings or lists of
        strings, nested to any depth.
        """
        if not isinstance(data, dict):
            logger.warning(
                "invalid_translation_format", file=str(source_file), expected="dict"
            )
            return
        catalog.merge(data)

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


class JSONTranslationLoader(FileTranslationLoader):
    """Loader for JSON translation files (en.json, home.en.json)."""

    suffixes = (".json",)
    format_name = "json"

    def _parse(self, handle) -> Any:
        # json.JSONDecodeError is a ValueError subclass
        return json.load(handle)


class YAMLTranslationLoader(FileTranslationLoader):
    """Loader for YAML translation files (en.yml, home.en.yaml)."""

    suffixes = (".yml", ".yaml")
    format_name = "yaml"

    def _parse(self, handle) -> Any:
        try:
            return yaml.safe_load(handle)
        except yaml.YAMLError as e:
            raise ValueError(str(e)) from e
