"""Process-local presence: which user is reachable through which socket."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PresenceEntry:
    user_id: int
    connection: str
    role: str


class PresenceRegistry:
    """Map of user id to its single active connection.

    At most one entry per user: a later connect for the same user replaces
    the earlier one. Nothing is persisted, so after a restart every user is
    offline until they reconnect.
    """

    def __init__(self) -> None:
        self._entries: dict[int, PresenceEntry] = {}
        self._users_by_connection: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, user_id: int, connection: str, role: str) -> PresenceEntry:
        previous = self._entries.get(user_id)
        if previous is not None:
            self._users_by_connection.pop(previous.connection, None)
        entry = PresenceEntry(user_id=user_id, connection=connection, role=role)
        self._entries[user_id] = entry
        self._users_by_connection[connection] = user_id
        return entry

    def unregister(self, user_id: int, connection: str | None = None) -> PresenceEntry | None:
        """Remove the user's entry; no-op if absent.

        With ``connection`` given, only an entry still bound to that connection
        is removed, so a superseded socket closing late cannot take the newer
        one offline.
        """
        entry = self._entries.get(user_id)
        if entry is None:
            return None
        if connection is not None and entry.connection != connection:
            self._users_by_connection.pop(connection, None)
            return None
        del self._entries[user_id]
        self._users_by_connection.pop(entry.connection, None)
        return entry

    def unregister_connection(self, connection: str) -> PresenceEntry | None:
        user_id = self._users_by_connection.get(connection)
        if user_id is None:
            return None
        return self.unregister(user_id, connection)

    def is_online(self, user_id: int) -> bool:
        return user_id in self._entries

    def lookup(self, user_id: int) -> str | None:
        entry = self._entries.get(user_id)
        return entry.connection if entry is not None else None

    def online_user_ids(self) -> set[int]:
        return set(self._entries)
