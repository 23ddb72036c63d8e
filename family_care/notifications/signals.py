from django.contrib.auth import get_user_model
from django.db.models.signals import post_save
from django.dispatch import receiver

from .services import ensure_settings


@receiver(post_save, sender=get_user_model())
def create_notification_settings(sender, instance, created, **kwargs):
    """Every new user starts with all notification toggles on."""

    if created:
        ensure_settings(instance.pk)
