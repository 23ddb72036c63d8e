from __future__ import annotations

from typing import TYPE_CHECKING

from family_care.notifications.services import ensure_settings
from family_care.users.models import User

from .models import Contact

if TYPE_CHECKING:  # import for type checking only
    from django.db.models import QuerySet


def contacts_of(user_id: int) -> QuerySet[User]:
    return User.objects.filter(
        pk__in=Contact.objects.filter(user_id=user_id).values("contact_user_id")
    ).order_by("first_name")


def contact_ids_of(user_id: int) -> list[int]:
    return list(
        Contact.objects.filter(user_id=user_id).values_list(
            "contact_user_id", flat=True
        )
    )


def link_contacts(user_id: int, other_id: int) -> None:
    """Store the symmetric edge as two directed rows; existing rows are kept."""

    ensure_settings(user_id)
    ensure_settings(other_id)
    Contact.objects.get_or_create(user_id=user_id, contact_user_id=other_id)
    Contact.objects.get_or_create(user_id=other_id, contact_user_id=user_id)
