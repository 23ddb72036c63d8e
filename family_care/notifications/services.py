from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.db import DatabaseError

from family_care.contacts.models import Contact
from family_care.realtime.events.exercises import publish_exercise_completed

from .models import NotificationSettings

if TYPE_CHECKING:  # import for type checking only
    from family_care.exercises.models import Exercise
    from family_care.realtime.relay import EventRelay

logger = logging.getLogger(__name__)

TOGGLES = (
    "elderly_notify_exercise",
    "elderly_notify_checkup",
    "family_notify_parent_done",
)


def ensure_settings(user_id: int) -> NotificationSettings:
    settings_row, _ = NotificationSettings.objects.get_or_create(user_id=user_id)
    return settings_row


def save_settings(user_id: int, values: dict[str, object]) -> NotificationSettings:
    """Upsert every toggle; a value that is not a number resets it to on."""

    defaults = {}
    for name in TOGGLES:
        value = values.get(name)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            defaults[name] = bool(value)
        else:
            defaults[name] = True
    settings_row, _ = NotificationSettings.objects.update_or_create(
        user_id=user_id,
        defaults=defaults,
    )
    return settings_row


def family_contact_ids(user_id: int) -> list[int]:
    return list(
        Contact.objects.filter(
            user_id=user_id,
            contact_user__role="family",
        ).values_list("contact_user_id", flat=True)
    )


def notify_family_of_exercise(relay: EventRelay, exercise: Exercise) -> int:
    """Fan an ``exercise:completed`` push out to the user's family contacts.

    Runs after the exercise row is committed. A missing settings row or a
    failed read counts as "notifications disabled"; nothing is surfaced to the
    caller. Returns the number of pushes attempted.
    """

    try:
        enabled = (
            NotificationSettings.objects.filter(user_id=exercise.user_id)
            .values_list("family_notify_parent_done", flat=True)
            .first()
        )
        recipient_ids = family_contact_ids(exercise.user_id) if enabled else []
    except DatabaseError:
        logger.exception(
            "Exercise fan-out skipped for user %s: settings lookup failed",
            exercise.user_id,
        )
        return 0

    publish_exercise_completed(relay, exercise, recipient_ids)
    return len(recipient_ids)
