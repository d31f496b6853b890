"""Local key-value persistence.

Mirrors a browser-local store: string keys, JSON-serializable values. Writes
are synchronous (write-through) so an acknowledged mutation survives a reload.
"""

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)

WISHLIST_KEY = "wishlist"
AUTH_TOKEN_KEY = "authToken"


class KeyValueStore(Protocol):
    """Protocol for local key-value storage."""

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value."""
        ...

    def remove(self, key: str) -> None:
        """Delete a key; missing keys are ignored."""
        ...


class InMemoryKeyValueStore:
    """In-memory implementation of KeyValueStore."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> Any | None:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        # Round-trip through JSON so non-serializable values fail here, not later
        self._data[key] = json.loads(json.dumps(value))

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileKeyValueStore:
    """KeyValueStore backed by a single JSON document on disk.

    Every write replaces the file atomically.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._data: dict[str, Any] = self._load()

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Local store at {self.path} is unreadable, starting empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Local store at {self.path} is not a JSON object, starting empty")
            return {}
        return data

    def get(self, key: str) -> Any | None:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        updated = dict(self._data)
        updated[key] = json.loads(json.dumps(value))
        self._flush(updated)
        self._data = updated

    def remove(self, key: str) -> None:
        if key not in self._data:
            return
        updated = {k: v for k, v in self._data.items() if k != key}
        self._flush(updated)
        self._data = updated

    def _flush(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
