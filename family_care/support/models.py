from django.conf import settings
from django.db import models


class SupportMessage(models.Model):
    """One line of a user's support thread, written by the user or the bot."""

    BOT_ROLE = "bot"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="support_messages",
    )
    role = models.CharField(max_length=16)
    content = models.TextField()
    is_bot = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"SupportMessage({self.user_id}, {self.role})"
