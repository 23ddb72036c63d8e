"""Phone sign-in: user upsert plus one-time password issue/verify."""

from __future__ import annotations

import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.utils import timezone

from family_care.common.exceptions import ApiError
from family_care.common.exceptions import ApiServerError
from family_care.notifications.services import ensure_settings

from .models import OneTimePassword
from .models import User

logger = logging.getLogger(__name__)

OTP_DIGITS = 6


def normalize_role(value: object) -> str:
    """Anything other than an explicit ``family`` signs up as elderly."""
    if value == User.Role.FAMILY:
        return User.Role.FAMILY
    return User.Role.ELDERLY


def upsert_user(*, phone: str, first_name: str, last_name: str, role: str) -> User:
    user = User.objects.filter(phone=phone).first()
    if user is None:
        user = User.objects.create_user(
            phone=phone,
            first_name=first_name,
            last_name=last_name,
            role=role,
        )
    else:
        user.first_name = first_name
        user.last_name = last_name
        user.role = role
        user.save(update_fields=["first_name", "last_name", "role"])
    ensure_settings(user.pk)
    return user


def generate_otp_code() -> str:
    low = 10 ** (OTP_DIGITS - 1)
    return str(low + secrets.randbelow(9 * low))


def issue_otp(phone: str) -> OneTimePassword:
    """Store a fresh code for ``phone``, replacing any unconsumed one."""

    code = generate_otp_code()
    expires_at = timezone.now() + timedelta(seconds=settings.OTP_TTL_SECONDS)
    otp, _ = OneTimePassword.objects.update_or_create(
        phone=phone,
        defaults={"code": code, "expires_at": expires_at},
    )
    if settings.OTP_EXPOSE_DEV_CODE:
        logger.info("[OTP][DEV] %s => %s", phone, code)
    else:
        logger.info("OTP issued for %s", phone)
    return otp


def verify_otp(phone: str, code: str) -> User:
    """Consume the code for ``phone`` and return the user it signs in.

    A wrong or expired code leaves the record in place; requesting a new code
    is the only way forward.
    """

    otp = OneTimePassword.objects.filter(phone=phone).first()
    if otp is None:
        raise ApiError("otp_not_found")
    if otp.code != code:
        raise ApiError("otp_invalid")
    if otp.is_expired():
        raise ApiError("otp_expired")

    user = User.objects.filter(phone=phone).first()
    if user is None:
        raise ApiServerError("user_not_found")

    OneTimePassword.objects.filter(phone=phone).delete()
    return user


def purge_expired_otps(now=None) -> int:
    deleted, _ = OneTimePassword.objects.filter(
        expires_at__lt=now or timezone.now(),
    ).delete()
    return deleted
