from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class NotificationSettings(models.Model):
    """Per-user notification toggles, all on by default."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="notification_settings",
    )
    elderly_notify_exercise = models.BooleanField(
        _("Remind elderly user to exercise"), default=True
    )
    elderly_notify_checkup = models.BooleanField(
        _("Remind elderly user about checkups"), default=True
    )
    family_notify_parent_done = models.BooleanField(
        _("Tell family when their parent finishes exercising"), default=True
    )

    class Meta:
        verbose_name = _("notification settings")
        verbose_name_plural = _("notification settings")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"NotificationSettings({self.user_id})"
