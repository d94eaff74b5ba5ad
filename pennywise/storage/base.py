"""Mini README: Abstract key-value storage used to persist Pennywise state.

Structure:
    * StorageError - raised when a backend cannot write a value.
    * KeyValueStorage - abstract ``get``/``set`` interface implemented by backends.

Values are always strings. Callers own serialisation, and a backend that
cannot read a value reports it as absent instead of raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class StorageError(RuntimeError):
    """Raised when a storage backend fails to persist a value."""


class KeyValueStorage(ABC):
    """Base interface for durable key-value stores."""

    backend_name: str = "generic"

    def __init__(self, location: Optional[str] = None) -> None:
        self.location = location
        LOGGER.debug("Initialising %s storage at '%s'", self.backend_name, location)

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored string for ``key`` or ``None`` when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    def metadata(self) -> Dict[str, str]:
        """Describe the backend and where it keeps data, for logs and the CLI."""

        return {
            "backend": self.backend_name,
            "location": self.location or "in memory",
        }
