from django.conf import settings
from django.db import models


class Contact(models.Model):
    """Directed edge of the contacts graph.

    Adding a contact stores both directions, one row each.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="contact_links",
    )
    contact_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = (("user", "contact_user"),)

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"Contact({self.user_id}->{self.contact_user_id})"
