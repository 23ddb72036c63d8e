import pytest
from rest_framework.test import APIClient

from family_care.realtime.presence import PresenceRegistry
from family_care.realtime.relay import EventRelay
from family_care.realtime.socketio import get_gateway
from family_care.users.models import User
from tests.factories import create_family
from tests.factories import create_user
from tests.realtime import RealtimeHarness
from tests.realtime import RecordingServer


@pytest.fixture(autouse=True)
def realtime(monkeypatch) -> RealtimeHarness:
    """Fresh presence registry and a recording emitter for every test."""

    gateway = get_gateway()
    server = RecordingServer()
    registry = PresenceRegistry()
    monkeypatch.setattr(gateway, "registry", registry)
    monkeypatch.setattr(gateway, "relay", EventRelay(registry, server))
    return RealtimeHarness(registry=registry, server=server)


@pytest.fixture
def user(db) -> User:
    return create_user()


@pytest.fixture
def family_user(db) -> User:
    return create_family()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def client_for():
    """Return an API client whose session belongs to ``user``."""

    def _client_for(user: User) -> APIClient:
        client = APIClient()
        client.force_login(user)
        return client

    return _client_for
