from django.contrib.auth.models import AbstractUser
from django.db import models
from django.db.models import CharField
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .managers import UserManager


class User(AbstractUser):
    """
    Default custom user model for family_care.
    Users are identified by phone number and sign in with a one-time code,
    so username and email are not used.
    """

    class Role(models.TextChoices):
        ELDERLY = "elderly", _("Elderly")
        FAMILY = "family", _("Family")

    username = None  # type: ignore[assignment]
    email = None  # type: ignore[assignment]
    phone = CharField(_("Phone"), max_length=32, unique=True)
    role = CharField(
        _("Role"),
        max_length=16,
        choices=Role.choices,
        default=Role.ELDERLY,
    )

    USERNAME_FIELD = "phone"
    REQUIRED_FIELDS = []

    objects = UserManager()

    def __str__(self) -> str:
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name or self.phone

    @property
    def is_elderly(self) -> bool:
        return self.role == self.Role.ELDERLY

    @property
    def is_family(self) -> bool:
        return self.role == self.Role.FAMILY


class OneTimePassword(models.Model):
    """The single active sign-in code for a phone number.

    Reissuing overwrites the row, so only the newest code is ever valid.
    Successful verification deletes it.
    """

    phone = models.CharField(_("Phone"), max_length=32, primary_key=True)
    code = models.CharField(_("Code"), max_length=6)
    expires_at = models.DateTimeField(_("Expires at"))

    class Meta:
        verbose_name = _("one-time password")
        verbose_name_plural = _("one-time passwords")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"OTP({self.phone})"

    def is_expired(self, now=None) -> bool:
        return self.expires_at < (now or timezone.now())
