from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from family_care.realtime.presence import PresenceRegistry
    from family_care.users.models import User


@dataclass
class Emitted:
    event: str
    data: Any
    to: str | None


@dataclass
class RecordingServer:
    """Stands in for ``socketio.AsyncServer.emit`` and records every call."""

    emitted: list[Emitted] = field(default_factory=list)

    async def emit(self, event, data=None, to=None, room=None, **kwargs):
        self.emitted.append(Emitted(event=event, data=data, to=to or room))

    def events(self, name: str) -> list[Emitted]:
        return [e for e in self.emitted if e.event == name]


@dataclass
class RealtimeHarness:
    registry: PresenceRegistry
    server: RecordingServer

    def connect(self, user: User, sid: str | None = None) -> str:
        sid = sid or f"sid-{user.pk}"
        self.registry.register(user.pk, sid, user.role)
        return sid

    def pushes(self, event: str) -> list[Emitted]:
        return self.server.events(event)
