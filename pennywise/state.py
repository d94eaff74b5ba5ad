"""Mini README: Process-wide application state for Pennywise.

Structure:
    * AppState - ledger, selected month filter and dark-mode flag, loaded
      once from storage and written back after every change.
    * open_storage - build the configured storage backend from settings.

The web interface owns exactly one ``AppState``. Keeping the three pieces of
session state in one object means tests can drive the whole tracker against
an in-memory store without a rendering surface attached.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

from .configuration import PennywiseSettings
from .finance import LedgerStore, Projection, project
from .logging_utils import get_logger
from .storage import REGISTRY, KeyValueStorage
from .utils.months import normalise_month

LOGGER = get_logger(__name__)

FILTER_MONTH_KEY = "filterMonth"
DARK_MODE_KEY = "darkMode"


def open_storage(settings: PennywiseSettings) -> KeyValueStorage:
    """Create the storage backend named by ``settings.storage_backend``."""

    location = str(settings.storage_path) if settings.storage_backend == "json" else None
    return REGISTRY.create(settings.storage_backend, location=location)


def _read_json(storage: KeyValueStorage, key: str) -> Optional[object]:
    raw = storage.get(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError as error:
        LOGGER.warning("Ignoring unreadable value for '%s': %s", key, error)
        return None


@dataclass
class AppState:
    """Explicit session state shared by every page of the tracker."""

    storage: KeyValueStorage
    ledger: LedgerStore
    filter_month: str = ""
    dark_mode: bool = False

    @classmethod
    def load(cls, storage: KeyValueStorage) -> "AppState":
        """Read ledger, filter and theme from storage, defaulting anything unreadable."""

        ledger = LedgerStore(storage)
        ledger.load()

        stored_month = _read_json(storage, FILTER_MONTH_KEY)
        filter_month = ""
        if isinstance(stored_month, str):
            try:
                filter_month = normalise_month(stored_month)
            except ValueError as error:
                LOGGER.warning("Ignoring stored month filter: %s", error)

        stored_dark_mode = _read_json(storage, DARK_MODE_KEY)
        dark_mode = stored_dark_mode if isinstance(stored_dark_mode, bool) else False

        LOGGER.debug(
            "Loaded state: %s transactions, filter='%s', dark_mode=%s",
            len(ledger),
            filter_month,
            dark_mode,
        )
        return cls(storage=storage, ledger=ledger, filter_month=filter_month, dark_mode=dark_mode)

    @classmethod
    def from_settings(cls, settings: PennywiseSettings) -> "AppState":
        return cls.load(open_storage(settings))

    def set_filter_month(self, month: Optional[str]) -> str:
        """Validate and persist a new month filter; blank clears it."""

        self.filter_month = normalise_month(month)
        self.storage.set(FILTER_MONTH_KEY, json.dumps(self.filter_month))
        LOGGER.info("Month filter set to '%s'", self.filter_month or "all")
        return self.filter_month

    def set_dark_mode(self, enabled: bool) -> bool:
        self.dark_mode = bool(enabled)
        self.storage.set(DARK_MODE_KEY, json.dumps(self.dark_mode))
        LOGGER.info("Dark mode %s", "enabled" if self.dark_mode else "disabled")
        return self.dark_mode

    def toggle_dark_mode(self) -> bool:
        return self.set_dark_mode(not self.dark_mode)

    def projection(self, month: Optional[str] = None) -> Projection:
        """Project the ledger for ``month``, or for the stored filter when omitted."""

        effective = self.filter_month if month is None else normalise_month(month)
        return project(self.ledger.list(), effective)
