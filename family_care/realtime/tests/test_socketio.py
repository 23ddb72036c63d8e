import pytest
from asgiref.sync import async_to_sync

from family_care.realtime.socketio import PRESENCE_EVENT
from family_care.realtime.socketio import RealtimeGateway
from family_care.realtime.socketio import extract_identity
from family_care.realtime.socketio import get_gateway
from family_care.realtime.socketio import socketio_cors_origins
from tests.realtime import RecordingServer


@pytest.fixture
def gateway(monkeypatch):
    gw = RealtimeGateway()
    server = RecordingServer()
    monkeypatch.setattr(gw.sio, "emit", server.emit)
    gw.recorded = server
    return gw


def test_identity_from_auth_payload():
    identity = extract_identity({}, {"userId": "12", "role": "family"})

    assert identity.user_id == 12
    assert identity.role == "family"


def test_identity_falls_back_to_query_string():
    environ = {"asgi.scope": {"query_string": b"userId=5&role=family"}}

    identity = extract_identity(environ, None)

    assert identity.user_id == 5
    assert identity.role == "family"


def test_identity_parses_leading_integer_and_defaults_role():
    identity = extract_identity({"QUERY_STRING": "userId=9abc&role=admin"}, {})

    assert identity.user_id == 9
    assert identity.role == "elderly"


@pytest.mark.parametrize("raw", [None, "", "abc", "0", "-3", True])
def test_identity_requires_positive_user_id(raw):
    assert extract_identity({}, {"userId": raw}) is None


def test_connect_registers_and_broadcasts(gateway):
    async_to_sync(gateway.on_connect)("sid-1", {}, {"userId": 3, "role": "elderly"})

    assert gateway.registry.lookup(3) == "sid-1"
    pushes = gateway.recorded.events(PRESENCE_EVENT)
    assert [p.data for p in pushes] == [{"userId": 3, "online": True}]
    assert pushes[0].to is None


def test_connect_without_identity_is_refused(gateway):
    with pytest.raises(ConnectionRefusedError):
        async_to_sync(gateway.on_connect)("sid-1", {}, {})

    assert len(gateway.registry) == 0
    assert gateway.recorded.emitted == []


def test_disconnect_marks_user_offline(gateway):
    async_to_sync(gateway.on_connect)("sid-1", {}, {"userId": 3})
    async_to_sync(gateway.on_disconnect)("sid-1", "client disconnect")

    assert not gateway.registry.is_online(3)
    assert [p.data for p in gateway.recorded.events(PRESENCE_EVENT)] == [
        {"userId": 3, "online": True},
        {"userId": 3, "online": False},
    ]


def test_stale_disconnect_keeps_newer_connection(gateway):
    async_to_sync(gateway.on_connect)("sid-1", {}, {"userId": 3})
    async_to_sync(gateway.on_connect)("sid-2", {}, {"userId": 3})
    async_to_sync(gateway.on_disconnect)("sid-1")

    assert gateway.registry.lookup(3) == "sid-2"
    assert {"userId": 3, "online": False} not in [
        p.data for p in gateway.recorded.events(PRESENCE_EVENT)
    ]


def test_app_config_owns_a_single_gateway():
    assert get_gateway() is get_gateway()
    assert get_gateway().relay.registry is get_gateway().registry


def test_socket_origins_allow_all_in_development(settings):
    settings.CORS_ALLOW_ALL_ORIGINS = True

    assert socketio_cors_origins() == "*"


def test_socket_origins_follow_allow_list(settings):
    settings.CORS_ALLOW_ALL_ORIGINS = False
    settings.CORS_ALLOWED_ORIGINS = ["https://app.example.com"]

    assert socketio_cors_origins() == ["https://app.example.com"]


def test_empty_allow_list_means_same_origin_only(settings):
    settings.CORS_ALLOW_ALL_ORIGINS = False
    settings.CORS_ALLOWED_ORIGINS = []

    assert socketio_cors_origins() is None
    assert RealtimeGateway(cors_allowed_origins=None).sio.eio.cors_allowed_origins is None
