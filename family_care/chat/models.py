from django.conf import settings
from django.db import models


class Message(models.Model):
    """A chat message addressed to one recipient.

    Group sends are fanned out at write time: each contact gets its own row
    with ``is_group`` set. There is no conversation entity.
    """

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_messages",
    )
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="received_messages",
        null=True,
        blank=True,
    )
    is_group = models.BooleanField(default=False)
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"Message({self.sender_id}->{self.recipient_id})"
