"""Socket.IO server for the mobile/web clients.

Client convention:
- Socket.IO path: ``settings.SOCKETIO_PATH`` (default ``/socket.io``)
- Handshake: ``auth: {userId, role}``; ``?userId=&role=`` query params are
  accepted as a fallback for clients that cannot send an auth payload

Events emitted:
- ``presence:update`` ``{userId, online}`` to every connection on each
  connect/disconnect
- targeted events (``message:new``, ``exercise:completed``,
  ``exercise:reminder``) through ``RealtimeGateway.relay``
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qs

import socketio
from django.apps import apps
from django.conf import settings

from family_care.common.api import parse_positive_int
from family_care.users.models import User

from .presence import PresenceRegistry
from .relay import EventRelay

logger = logging.getLogger(__name__)

PRESENCE_EVENT = "presence:update"


@dataclass(frozen=True)
class RealtimeIdentity:
    user_id: int
    role: str


def _query_params(environ: dict[str, Any]) -> dict[str, list[str]]:
    """Parse the handshake query string.

    Handles python-socketio environ shapes across ASGI/WSGI servers.
    """

    scope: Any = environ
    if isinstance(environ, dict) and "asgi.scope" in environ:
        inner = environ.get("asgi.scope")
        if isinstance(inner, dict):
            scope = inner

    query_string: str | bytes = ""
    if isinstance(scope, dict) and "query_string" in scope:
        query_string = scope.get("query_string", b"")
    elif isinstance(scope, dict) and "QUERY_STRING" in scope:
        query_string = scope.get("QUERY_STRING", "")

    if isinstance(query_string, (bytes, bytearray)):
        query_string = query_string.decode(errors="ignore")

    return parse_qs(str(query_string))


def socketio_cors_origins() -> str | list[str] | None:
    """Socket.IO origin policy mirroring the HTTP CORS settings.

    An empty allow-list maps to ``None`` (same origin only); engine.io reads
    ``[]`` as "skip the origin check".
    """
    if getattr(settings, "CORS_ALLOW_ALL_ORIGINS", False):
        return "*"
    origins = list(getattr(settings, "CORS_ALLOWED_ORIGINS", []))
    return origins or None


def extract_identity(environ: dict[str, Any], auth: Any | None) -> RealtimeIdentity | None:
    raw_user: Any = None
    raw_role: Any = None
    if isinstance(auth, dict):
        raw_user = auth.get("userId")
        raw_role = auth.get("role")

    if raw_user in (None, ""):
        params = _query_params(environ)
        raw_user = params.get("userId", [None])[0]
        raw_role = raw_role or params.get("role", [None])[0]

    user_id = parse_positive_int(raw_user)
    if user_id is None:
        return None

    role = raw_role if raw_role in User.Role.values else User.Role.ELDERLY
    return RealtimeIdentity(user_id=user_id, role=str(role))


class RealtimeGateway:
    """Owns the socket server, the presence registry and the event relay."""

    def __init__(self, *, cors_allowed_origins: str | list[str] | None = None):
        self.sio = socketio.AsyncServer(
            async_mode="asgi",
            cors_allowed_origins=cors_allowed_origins,
            logger=False,
            engineio_logger=False,
        )
        self.registry = PresenceRegistry()
        self.relay = EventRelay(self.registry, self.sio)
        self.sio.on("connect", self.on_connect)
        self.sio.on("disconnect", self.on_disconnect)

    async def on_connect(self, sid: str, environ: dict[str, Any], auth: Any | None = None):
        identity = extract_identity(environ, auth)
        if identity is None:
            logger.warning("Socket.IO connect refused: missing userId (sid=%s)", sid)
            msg = "unauthorized"
            raise ConnectionRefusedError(msg)

        self.registry.register(identity.user_id, sid, identity.role)
        logger.info(
            "User %s connected as %s (sid=%s)",
            identity.user_id,
            identity.role,
            sid,
        )
        await self.broadcast_presence(identity.user_id, online=True)

    async def on_disconnect(self, sid: str, reason: Any = None):
        entry = self.registry.unregister_connection(sid)
        if entry is None:
            # Superseded by a newer connection for the same user.
            return
        logger.info("User %s disconnected (sid=%s)", entry.user_id, sid)
        await self.broadcast_presence(entry.user_id, online=False)

    async def broadcast_presence(self, user_id: int, *, online: bool) -> None:
        await self.sio.emit(PRESENCE_EVENT, {"userId": user_id, "online": online})


def get_gateway() -> RealtimeGateway:
    return apps.get_app_config("realtime").gateway


def get_relay() -> EventRelay:
    return get_gateway().relay


def get_presence() -> PresenceRegistry:
    return get_gateway().registry
