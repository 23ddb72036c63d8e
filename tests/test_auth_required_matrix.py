from http import HTTPStatus

import pytest

PROTECTED = [
    ("get", "/api/contacts"),
    ("post", "/api/contacts/add"),
    ("get", "/api/messages/1"),
    ("post", "/api/messages"),
    ("post", "/api/exercise"),
    ("get", "/api/exercise/today"),
    ("get", "/api/exercise/records"),
    ("get", "/api/exercise/summary/week"),
    ("get", "/api/exercise/summary/month"),
    ("get", "/api/settings"),
    ("post", "/api/settings"),
    ("post", "/api/notify/parent"),
    ("get", "/api/support"),
    ("post", "/api/support"),
]

READ_ONLY = [url for method, url in PROTECTED if method == "get"]


@pytest.mark.django_db
@pytest.mark.parametrize(("method", "url"), PROTECTED)
def test_anonymous_requests_are_rejected(api_client, method, url):
    res = getattr(api_client, method)(url, {}, format="json")

    assert res.status_code == HTTPStatus.UNAUTHORIZED
    assert res.json() == {"error": "unauthorized"}


@pytest.mark.django_db
@pytest.mark.parametrize("url", READ_ONLY)
def test_signed_in_reads_succeed(client_for, user, url):
    res = client_for(user).get(url)

    assert res.status_code == HTTPStatus.OK


@pytest.mark.django_db
@pytest.mark.parametrize(
    "url",
    ["/api/auth/request-otp", "/api/auth/verify-otp", "/api/auth/logout"],
)
def test_auth_endpoints_are_open(api_client, url):
    res = api_client.post(url, {}, format="json")

    assert res.status_code != HTTPStatus.UNAUTHORIZED


@pytest.mark.django_db
def test_malformed_json_is_rejected(api_client):
    res = api_client.post(
        "/api/auth/request-otp", "{not json", content_type="application/json"
    )

    assert res.status_code == HTTPStatus.BAD_REQUEST
    assert res.json() == {"error": "invalid_json"}
