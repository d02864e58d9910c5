"""Preference storage interface and implementations.

Language detection may consult a previously stored preference, and the
language setter records one. Storage is injected so that environments
without persistent client storage can supply NullStorage.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class PreferenceStorage(ABC):
    """Abstract key-value storage scoped to one client or session."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Read a stored value.

        Args:
            key: Storage key.

        Returns:
            The stored value, or None if absent.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value under key, replacing any previous value."""
        pass


class NullStorage(PreferenceStorage):
    """Storage for environments without persistence.

    Always reports absent and ignores writes.
    """

    def get(self, key: str) -> Optional[str]:
        return None

    def set(self, key: str, value: str) -> None:
        return None


class InMemoryStorage(PreferenceStorage):
    """Dict-backed storage, for tests and single-process sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
