"""Mock authentication gate for the main view.

The gate only checks that some credential is present; nothing is verified.
A real deployment should swap in an AuthProvider that validates the token
server-side.
"""

from typing import Protocol

from backend.app.db.store import AUTH_TOKEN_KEY, KeyValueStore


class AuthProvider(Protocol):
    """Capability check deciding whether the main view may be shown."""

    def is_authenticated(self) -> bool:
        ...

    def login(self, token: str) -> None:
        ...

    def logout(self) -> None:
        ...


class LocalTokenAuthProvider:
    """Presence-only token kept in the local key-value store."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def is_authenticated(self) -> bool:
        return bool(self.store.get(AUTH_TOKEN_KEY))

    def login(self, token: str) -> None:
        if not token.strip():
            raise ValueError("token must not be empty")
        self.store.set(AUTH_TOKEN_KEY, token)

    def logout(self) -> None:
        self.store.remove(AUTH_TOKEN_KEY)
