"""Mini README: JSON file storage backend.

Structure:
    * JSONFileStorage - persists every key into one JSON object on disk.

The file maps keys to already-serialised strings, mirroring a browser's
local storage. A missing or unreadable file behaves as an empty store.
Writes go through a temporary file and ``os.replace`` so a crash mid-write
leaves the previous contents intact.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from ..base import KeyValueStorage, StorageError
from ..registry import REGISTRY
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


@REGISTRY.register
class JSONFileStorage(KeyValueStorage):
    """Key-value store backed by a single JSON document."""

    backend_name = "json"

    def __init__(self, location: Optional[str] = None) -> None:
        if not location:
            raise ValueError("JSON storage requires a file location.")
        super().__init__(location=str(location))
        self.path = Path(location)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
            LOGGER.warning("Ignoring unreadable storage file %s: %s", self.path, error)
            return {}
        if not isinstance(payload, dict):
            LOGGER.warning("Ignoring storage file %s: expected a JSON object", self.path)
            return {}
        return {str(key): value for key, value in payload.items() if isinstance(value, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._read_all()
        values[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            handle, temp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        except OSError as error:
            raise StorageError(f"Could not write {self.path}: {error}") from error
        try:
            with os.fdopen(handle, "w", encoding="utf-8") as stream:
                json.dump(values, stream, indent=2)
            os.replace(temp_name, self.path)
        except OSError as error:
            Path(temp_name).unlink(missing_ok=True)
            raise StorageError(f"Could not write {self.path}: {error}") from error
        LOGGER.debug("Persisted key '%s' to %s", key, self.path)

