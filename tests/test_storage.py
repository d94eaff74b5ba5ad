"""Mini README: Tests for the storage registry and built-in backends.

Ensures backends register on import, the JSON file backend round-trips
values across instances, and unreadable files behave as empty stores.
"""

from __future__ import annotations

import pytest

from pennywise.storage import (
    REGISTRY,
    InMemoryStorage,
    JSONFileStorage,
    KeyValueStorage,
    StorageError,
    StorageRegistry,
)
from pennywise.storage.backends import json_file


def test_registry_contains_builtin_backends() -> None:
    assert {"json", "memory"} <= set(REGISTRY.available_backends())


def test_registry_creates_backend(tmp_path) -> None:
    storage = REGISTRY.create("JSON", location=str(tmp_path / "store.json"))
    assert isinstance(storage, JSONFileStorage)
    assert isinstance(REGISTRY.create("memory"), KeyValueStorage)


def test_registry_rejects_unknown_backend() -> None:
    with pytest.raises(KeyError, match="available: json, memory"):
        REGISTRY.create("redis")


def test_registry_refuses_to_reuse_a_backend_name() -> None:
    registry = StorageRegistry()
    assert registry.register(InMemoryStorage) is InMemoryStorage
    registry.register(InMemoryStorage)

    class ShadowStorage(InMemoryStorage):
        backend_name = "memory"

    with pytest.raises(ValueError):
        registry.register(ShadowStorage)
    assert registry.available_backends() == ["memory"]


def test_json_storage_persists_across_instances(tmp_path) -> None:
    path = tmp_path / "nested" / "store.json"
    JSONFileStorage(str(path)).set("darkMode", "true")
    JSONFileStorage(str(path)).set("filterMonth", '"2024-03"')

    reopened = JSONFileStorage(str(path))
    assert reopened.get("darkMode") == "true"
    assert reopened.get("filterMonth") == '"2024-03"'
    assert reopened.get("transactions") is None
    assert reopened.metadata() == {"backend": "json", "location": str(path)}


def test_json_storage_treats_corrupt_file_as_empty(tmp_path) -> None:
    path = tmp_path / "store.json"
    path.write_text("[1, 2", encoding="utf-8")

    storage = JSONFileStorage(str(path))
    assert storage.get("transactions") is None

    storage.set("transactions", "[]")
    assert JSONFileStorage(str(path)).get("transactions") == "[]"


def test_json_storage_requires_location() -> None:
    with pytest.raises(ValueError):
        JSONFileStorage()


def test_memory_storage_round_trip() -> None:
    storage = InMemoryStorage()
    assert storage.get("darkMode") is None
    storage.set("darkMode", "false")
    assert storage.get("darkMode") == "false"
    assert storage.metadata()["location"] == "in memory"


def test_json_storage_failed_write_leaves_no_temp_file(tmp_path, monkeypatch) -> None:
    """A failed replace raises StorageError and keeps the previous file."""

    path = tmp_path / "store.json"
    storage = JSONFileStorage(str(path))
    storage.set("darkMode", "false")

    def _fail_replace(source, destination):
        raise OSError("disk full")

    monkeypatch.setattr(json_file.os, "replace", _fail_replace)
    with pytest.raises(StorageError):
        storage.set("darkMode", "true")
    monkeypatch.undo()

    assert sorted(entry.name for entry in tmp_path.iterdir()) == ["store.json"]
    assert storage.get("darkMode") == "false"
