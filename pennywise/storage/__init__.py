"""Mini README: Durable key-value storage subsystem.

Re-exports the abstract ``KeyValueStorage`` interface, the backend
``REGISTRY`` and the built-in backends. Importing the package registers the
``json`` and ``memory`` backends.
"""

from .base import KeyValueStorage, StorageError
from .registry import REGISTRY, StorageRegistry
from .backends import InMemoryStorage, JSONFileStorage

__all__ = [
    "InMemoryStorage",
    "JSONFileStorage",
    "KeyValueStorage",
    "REGISTRY",
    "StorageError",
    "StorageRegistry",
]
