"""Unit tests for local key-value stores."""

import json
from pathlib import Path

import pytest

from backend.app.db.store import InMemoryKeyValueStore, JsonFileKeyValueStore


def test_in_memory_store_get_set_remove() -> None:
    store = InMemoryKeyValueStore()

    assert store.get("wishlist") is None

    store.set("wishlist", [{"id": "a"}])
    assert store.get("wishlist") == [{"id": "a"}]

    store.remove("wishlist")
    store.remove("wishlist")
    assert store.get("wishlist") is None


def test_in_memory_store_returns_copies() -> None:
    """Test that callers cannot mutate stored values through a returned reference."""
    store = InMemoryKeyValueStore({"wishlist": [{"id": "a"}]})

    value = store.get("wishlist")
    value.append({"id": "b"})

    assert store.get("wishlist") == [{"id": "a"}]


def test_in_memory_store_rejects_non_json_values() -> None:
    store = InMemoryKeyValueStore()

    with pytest.raises(TypeError):
        store.set("wishlist", {1, 2})


def test_json_file_store_survives_reload(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "store.json"
    store = JsonFileKeyValueStore(path)

    store.set("authToken", "mock-token-alex")
    store.set("wishlist", [{"id": "a"}])

    reloaded = JsonFileKeyValueStore(path)
    assert reloaded.get("authToken") == "mock-token-alex"
    assert reloaded.get("wishlist") == [{"id": "a"}]


def test_json_file_store_remove_persists(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    store = JsonFileKeyValueStore(path)
    store.set("authToken", "t")

    store.remove("authToken")

    assert json.loads(path.read_text()) == {}
    assert JsonFileKeyValueStore(path).get("authToken") is None


def test_json_file_store_leaves_no_temp_files(tmp_path: Path) -> None:
    store = JsonFileKeyValueStore(tmp_path / "store.json")

    store.set("a", 1)
    store.set("b", 2)

    assert [p.name for p in tmp_path.iterdir()] == ["store.json"]


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_json_file_store_tolerates_unreadable_file(tmp_path: Path, content: str) -> None:
    path = tmp_path / "store.json"
    path.write_text(content)

    store = JsonFileKeyValueStore(path)

    assert store.get("wishlist") is None
    store.set("wishlist", [])
    assert json.loads(path.read_text()) == {"wishlist": []}
