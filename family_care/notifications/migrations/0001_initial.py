import django.db.models.deletion
from django.conf import settings
from django.db import migrations
from django.db import models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="NotificationSettings",
            fields=[
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="notification_settings",
                        serialize=False,
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "elderly_notify_exercise",
                    models.BooleanField(
                        default=True, verbose_name="Remind elderly user to exercise"
                    ),
                ),
                (
                    "elderly_notify_checkup",
                    models.BooleanField(
                        default=True,
                        verbose_name="Remind elderly user about checkups",
                    ),
                ),
                (
                    "family_notify_parent_done",
                    models.BooleanField(
                        default=True,
                        verbose_name="Tell family when their parent finishes exercising",
                    ),
                ),
            ],
            options={
                "verbose_name": "notification settings",
                "verbose_name_plural": "notification settings",
            },
        ),
    ]
