"""Wishlist repository on top of a KeyValueStore."""

import logging
from datetime import datetime

from pydantic import TypeAdapter, ValidationError

from backend.app.db.store import WISHLIST_KEY, KeyValueStore
from backend.app.errors import PersistenceCorrupt
from backend.app.models.route import GeneratedRoute, SavedRoute

logger = logging.getLogger(__name__)

_saved_routes = TypeAdapter(list[SavedRoute])


class WishlistRepository:
    """Deduplicated, persisted collection of saved routes keyed by route id.

    The in-memory list is the source of truth for reads; every mutation is
    written through to the store before it is acknowledged.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self._items: list[SavedRoute] = self._load()

    def _load(self) -> list[SavedRoute]:
        try:
            return self._parse(self.store.get(WISHLIST_KEY))
        except PersistenceCorrupt as e:
            logger.warning(f"Discarding corrupt wishlist: {e.message}")
            self.store.remove(WISHLIST_KEY)
            return []

    @staticmethod
    def _parse(raw: object) -> list[SavedRoute]:
        if raw is None:
            return []
        try:
            items = _saved_routes.validate_python(raw)
        except ValidationError as e:
            raise PersistenceCorrupt(f"{e.error_count()} invalid field(s) in stored wishlist") from e

        # Set semantics: first occurrence of an id wins
        seen: set[str] = set()
        unique: list[SavedRoute] = []
        for item in items:
            if item.id not in seen:
                seen.add(item.id)
                unique.append(item)
        return unique

    def _persist(self, items: list[SavedRoute]) -> None:
        self.store.set(WISHLIST_KEY, [item.to_wire() for item in items])
        self._items = items

    def items(self) -> list[SavedRoute]:
        return list(self._items)

    def get(self, route_id: str) -> SavedRoute | None:
        for item in self._items:
            if item.id == route_id:
                return item
        return None

    def contains(self, route_id: str) -> bool:
        return self.get(route_id) is not None

    def add(self, route: GeneratedRoute, saved_at: datetime | None = None) -> SavedRoute | None:
        """Save a route.

        Returns:
            The new entry, or None if a route with the same id is already saved
            (the existing entry is left untouched)
        """
        if self.contains(route.id):
            return None
        entry = SavedRoute.from_route(route, saved_at=saved_at)
        self._persist([*self._items, entry])
        return entry

    def remove(self, route_id: str) -> bool:
        """Remove a route by id. Returns True if something was removed."""
        remaining = [item for item in self._items if item.id != route_id]
        if len(remaining) == len(self._items):
            return False
        self._persist(remaining)
        return True

    def __len__(self) -> int:
        return len(self._items)
