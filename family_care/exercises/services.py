from __future__ import annotations

import datetime as dt
import math
from functools import partial
from typing import TYPE_CHECKING

from django.db import transaction
from django.utils import timezone

from family_care.notifications.services import notify_family_of_exercise

from .models import Exercise

if TYPE_CHECKING:  # import for type checking only
    from django.db.models import QuerySet

    from family_care.realtime.relay import EventRelay
    from family_care.users.models import User

WEEK_DAYS = 7
MONTH_DAYS = 30


def today() -> dt.date:
    return timezone.now().date()


def log_exercise(  # noqa: PLR0913
    relay: EventRelay,
    *,
    user: User,
    exercise_type: str,
    duration: float,
    fatigue_level: int | None = None,
    difficulty: str | None = None,
) -> Exercise:
    """Store today's session; elderly users' family may be told once it commits."""

    exercise = Exercise.objects.create(
        user=user,
        date=today(),
        exercise_type=exercise_type,
        duration_min=max(0, math.floor(duration)),
        fatigue_level=fatigue_level,
        difficulty=difficulty,
    )
    if user.is_elderly:
        transaction.on_commit(partial(notify_family_of_exercise, relay, exercise))
    return exercise


def latest_for_today(user_id: int) -> Exercise | None:
    return (
        Exercise.objects.filter(user_id=user_id, date=today()).order_by("-id").first()
    )


def records_for(user_id: int) -> QuerySet[Exercise]:
    return Exercise.objects.filter(user_id=user_id).order_by("-date", "-id")


def records_since(user_id: int, days: int) -> QuerySet[Exercise]:
    """Rows in the trailing ``days``-day window ending today, oldest first."""

    since = today() - dt.timedelta(days=days - 1)
    return Exercise.objects.filter(user_id=user_id, date__gte=since).order_by(
        "date", "id"
    )
