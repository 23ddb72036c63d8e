from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

from asgiref.sync import async_to_sync

if TYPE_CHECKING:
    import socketio

    from .presence import PresenceRegistry

logger = logging.getLogger(__name__)


class EventRelay:
    """Best-effort push of a named event to one user's active connection.

    Delivery is at most once: if the user is not connected the call returns
    without queueing, retrying or recording anything, and a later connect does
    not receive the missed event.
    """

    def __init__(self, registry: PresenceRegistry, server: socketio.AsyncServer):
        self.registry = registry
        self.server = server

    def deliver(self, user_id: int, event: str, payload: dict[str, Any]) -> None:
        """Emit from sync Django code (views, ``on_commit`` callbacks)."""

        connection = self.registry.lookup(int(user_id))
        if connection is None:
            return
        async_to_sync(self.server.emit)(event, payload, to=connection)
        logger.debug("Delivered %s to user %s (sid=%s)", event, user_id, connection)

