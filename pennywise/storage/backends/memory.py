"""Mini README: Dictionary-backed storage for tests and throwaway sessions."""

from __future__ import annotations

from typing import Dict, Optional

from ..base import KeyValueStorage
from ..registry import REGISTRY


@REGISTRY.register
class InMemoryStorage(KeyValueStorage):
    """Keep values in a plain dictionary for the lifetime of the object."""

    backend_name = "memory"

    def __init__(self, location: Optional[str] = None) -> None:
        super().__init__(location=None)
        self._values: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

