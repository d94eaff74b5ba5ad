"""Mini README: Registry mapping backend identifiers to storage classes.

Structure:
    * StorageRegistry - class decorator registry for ``KeyValueStorage``
      backends plus a factory that builds one from an identifier.

Backends decorate themselves with ``@REGISTRY.register`` on import, so the
``storage_backend`` setting resolves without callers importing concrete
classes. A name can only be claimed once.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type, TypeVar

from .base import KeyValueStorage
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

BackendT = TypeVar("BackendT", bound=Type[KeyValueStorage])


class StorageRegistry:
    """Resolve ``storage_backend`` names to ``KeyValueStorage`` subclasses."""

    def __init__(self) -> None:
        self._backends: Dict[str, Type[KeyValueStorage]] = {}

    def register(self, backend: BackendT) -> BackendT:
        """Class decorator adding ``backend`` under its ``backend_name``."""

        identifier = backend.backend_name.lower()
        existing = self._backends.get(identifier)
        if existing is not None and existing is not backend:
            raise ValueError(
                f"Storage backend '{identifier}' is already provided by {existing.__name__}"
            )
        self._backends[identifier] = backend
        LOGGER.debug("Storage backend '%s' -> %s", identifier, backend.__name__)
        return backend

    def available_backends(self) -> List[str]:
        return sorted(self._backends)

    def create(self, identifier: str, *, location: Optional[str] = None) -> KeyValueStorage:
        """Build the backend named ``identifier`` pointed at ``location``."""

        backend_cls = self._backends.get(identifier.lower())
        if backend_cls is None:
            choices = ", ".join(self.available_backends()) or "none"
            raise KeyError(f"Unknown storage backend '{identifier}' (available: {choices})")
        storage = backend_cls(location=location)
        LOGGER.info("Opened %s storage at %s", identifier.lower(), storage.metadata()["location"])
        return storage


REGISTRY = StorageRegistry()
