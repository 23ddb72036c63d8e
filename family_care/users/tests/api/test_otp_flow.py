import datetime as dt
import re
from http import HTTPStatus

import pytest
from django.utils import timezone

from family_care.notifications.models import NotificationSettings
from family_care.users.models import OneTimePassword
from family_care.users.models import User

REQUEST_OTP_URL = "/api/auth/request-otp"
VERIFY_OTP_URL = "/api/auth/verify-otp"
ME_URL = "/api/auth/me"
LOGOUT_URL = "/api/auth/logout"


def _request_otp(client, phone="0811111111", **overrides):
    body = {"firstName": "Somsri", "lastName": "Jaidee", "phone": phone}
    body.update(overrides)
    return client.post(REQUEST_OTP_URL, body, format="json")


@pytest.mark.django_db
def test_request_otp_for_new_phone_creates_user_and_code(api_client):
    before = timezone.now()
    res = _request_otp(api_client)

    assert res.status_code == HTTPStatus.OK
    body = res.json()
    assert body["ok"] is True
    assert re.fullmatch(r"\d{6}", body["devCode"])

    user = User.objects.get(phone="0811111111")
    assert user.first_name == "Somsri"
    assert user.role == User.Role.ELDERLY
    assert not user.has_usable_password()
    assert NotificationSettings.objects.filter(user=user).exists()

    otp = OneTimePassword.objects.get(phone="0811111111")
    assert otp.code == body["devCode"]
    ttl = otp.expires_at - before
    assert dt.timedelta(minutes=4, seconds=59) <= ttl <= dt.timedelta(minutes=5, seconds=5)


@pytest.mark.django_db
@pytest.mark.parametrize("missing", ["firstName", "lastName", "phone"])
def test_request_otp_requires_name_and_phone(api_client, missing):
    body = {"firstName": "A", "lastName": "B", "phone": "0800000001"}
    body[missing] = ""
    res = api_client.post(REQUEST_OTP_URL, body, format="json")

    assert res.status_code == HTTPStatus.BAD_REQUEST
    assert res.json() == {"error": "missing_fields"}
    assert not OneTimePassword.objects.exists()


@pytest.mark.django_db
def test_request_otp_updates_existing_user_and_normalizes_role(api_client):
    _request_otp(api_client, role="family")
    assert User.objects.get(phone="0811111111").role == User.Role.FAMILY

    _request_otp(api_client, firstName="Somying", role="grandparent")

    user = User.objects.get(phone="0811111111")
    assert user.first_name == "Somying"
    assert user.role == User.Role.ELDERLY
    assert User.objects.count() == 1


@pytest.mark.django_db
def test_reissued_code_replaces_previous_one(api_client):
    _request_otp(api_client)
    second = _request_otp(api_client).json()["devCode"]

    assert OneTimePassword.objects.count() == 1
    assert OneTimePassword.objects.get(phone="0811111111").code == second


@pytest.mark.django_db
def test_request_otp_hides_code_when_exposure_disabled(api_client, settings):
    settings.OTP_EXPOSE_DEV_CODE = False
    res = _request_otp(api_client)

    assert res.status_code == HTTPStatus.OK
    assert res.json() == {"ok": True}


@pytest.mark.django_db
def test_verify_otp_starts_session_and_consumes_code(api_client):
    code = _request_otp(api_client).json()["devCode"]

    res = api_client.post(
        VERIFY_OTP_URL, {"phone": "0811111111", "code": code}, format="json"
    )

    assert res.status_code == HTTPStatus.OK
    body = res.json()
    assert body["ok"] is True
    assert body["user"]["phone"] == "0811111111"
    assert body["user"]["firstName"] == "Somsri"
    assert set(body["user"]) == {"id", "firstName", "lastName", "phone", "role"}
    assert not OneTimePassword.objects.filter(phone="0811111111").exists()

    me = api_client.get(ME_URL).json()
    assert me["user"]["id"] == body["user"]["id"]


@pytest.mark.django_db
def test_verify_otp_succeeds_only_once(api_client):
    code = _request_otp(api_client).json()["devCode"]
    payload = {"phone": "0811111111", "code": code}

    first = api_client.post(VERIFY_OTP_URL, payload, format="json")
    second = api_client.post(VERIFY_OTP_URL, payload, format="json")

    assert first.status_code == HTTPStatus.OK
    assert second.status_code == HTTPStatus.BAD_REQUEST
    assert second.json() == {"error": "otp_not_found"}


@pytest.mark.django_db
def test_verify_otp_with_wrong_code_keeps_record(api_client):
    code = _request_otp(api_client).json()["devCode"]
    wrong = "000000" if code != "000000" else "111111"

    res = api_client.post(
        VERIFY_OTP_URL, {"phone": "0811111111", "code": wrong}, format="json"
    )

    assert res.status_code == HTTPStatus.BAD_REQUEST
    assert res.json() == {"error": "otp_invalid"}
    assert OneTimePassword.objects.filter(phone="0811111111").exists()


@pytest.mark.django_db
def test_verify_expired_otp_fails_without_session(api_client):
    code = _request_otp(api_client).json()["devCode"]
    OneTimePassword.objects.filter(phone="0811111111").update(
        expires_at=timezone.now() - dt.timedelta(seconds=1)
    )

    res = api_client.post(
        VERIFY_OTP_URL, {"phone": "0811111111", "code": code}, format="json"
    )

    assert res.status_code == HTTPStatus.BAD_REQUEST
    assert res.json() == {"error": "otp_expired"}
    assert api_client.get(ME_URL).json() == {"user": None}
    assert OneTimePassword.objects.filter(phone="0811111111").exists()


@pytest.mark.django_db
def test_verify_otp_requires_phone_and_code(api_client):
    res = api_client.post(VERIFY_OTP_URL, {"phone": "0811111111"}, format="json")

    assert res.status_code == HTTPStatus.BAD_REQUEST
    assert res.json() == {"error": "missing_fields"}


@pytest.mark.django_db
def test_verify_otp_for_deleted_user_is_server_error(api_client):
    code = _request_otp(api_client).json()["devCode"]
    User.objects.filter(phone="0811111111").delete()

    res = api_client.post(
        VERIFY_OTP_URL, {"phone": "0811111111", "code": code}, format="json"
    )

    assert res.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert res.json() == {"error": "user_not_found"}


@pytest.mark.django_db
def test_me_is_null_for_anonymous_client(api_client):
    res = api_client.get(ME_URL)

    assert res.status_code == HTTPStatus.OK
    assert res.json() == {"user": None}


@pytest.mark.django_db
def test_logout_ends_session(client_for, user):
    client = client_for(user)
    assert client.get(ME_URL).json()["user"]["id"] == user.pk

    res = client.post(LOGOUT_URL)

    assert res.status_code == HTTPStatus.OK
    assert res.json() == {"ok": True}
    assert client.get(ME_URL).json() == {"user": None}
