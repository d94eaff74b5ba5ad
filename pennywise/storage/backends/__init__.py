"""Mini README: Concrete storage backends.

Each module subclasses ``KeyValueStorage`` and decorates it with ``@REGISTRY.register``
at import time so the backend becomes selectable from settings.
"""

from .json_file import JSONFileStorage
from .memory import InMemoryStorage

__all__ = ["InMemoryStorage", "JSONFileStorage"]
