import datetime as dt

import pytest
from django.utils import timezone

from family_care.common.exceptions import ApiError
from family_care.users.models import OneTimePassword
from family_care.users.models import User
from family_care.users.services import generate_otp_code
from family_care.users.services import issue_otp
from family_care.users.services import normalize_role
from family_care.users.services import purge_expired_otps
from family_care.users.services import verify_otp


def test_generated_codes_are_six_digits():
    codes = {generate_otp_code() for _ in range(200)}
    assert all(len(code) == 6 and code.isdigit() for code in codes)
    assert all(not code.startswith("0") for code in codes)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("family", "family"),
        ("elderly", "elderly"),
        ("FAMILY", "elderly"),
        (None, "elderly"),
        ("", "elderly"),
    ],
)
def test_normalize_role(value, expected):
    assert normalize_role(value) == expected


@pytest.mark.django_db
def test_issue_otp_uses_configured_ttl(settings):
    settings.OTP_TTL_SECONDS = 60
    before = timezone.now()

    otp = issue_otp("0899999999")

    assert before + dt.timedelta(seconds=59) <= otp.expires_at
    assert otp.expires_at <= timezone.now() + dt.timedelta(seconds=60)


@pytest.mark.django_db
def test_verify_otp_error_codes(user):
    with pytest.raises(ApiError) as excinfo:
        verify_otp(user.phone, "123456")
    assert excinfo.value.error_code == "otp_not_found"

    otp = issue_otp(user.phone)
    assert verify_otp(user.phone, otp.code) == user
    assert not OneTimePassword.objects.filter(phone=user.phone).exists()


@pytest.mark.django_db
def test_purge_expired_otps_keeps_live_codes():
    now = timezone.now()
    OneTimePassword.objects.create(
        phone="0800000001", code="111111", expires_at=now - dt.timedelta(minutes=1)
    )
    OneTimePassword.objects.create(
        phone="0800000002", code="222222", expires_at=now + dt.timedelta(minutes=1)
    )

    assert purge_expired_otps(now) == 1
    assert list(OneTimePassword.objects.values_list("phone", flat=True)) == [
        "0800000002"
    ]


@pytest.mark.django_db
def test_create_superuser_by_phone():
    admin = User.objects.create_superuser(phone="0700000000", password="x" * 12)

    assert admin.is_staff
    assert admin.is_superuser
    assert admin.check_password("x" * 12)
