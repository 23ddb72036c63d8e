from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Iterable

    from family_care.exercises.models import Exercise
    from family_care.realtime.relay import EventRelay

EXERCISE_COMPLETED = "exercise:completed"
EXERCISE_REMINDER = "exercise:reminder"


def build_exercise_completed_payload(exercise: Exercise) -> dict[str, Any]:
    return {
        "fromUserId": exercise.user_id,
        "exerciseType": exercise.exercise_type,
        "duration": exercise.duration_min,
        "fatigueLevel": exercise.fatigue_level,
    }


def publish_exercise_completed(
    relay: EventRelay,
    exercise: Exercise,
    recipient_ids: Iterable[int],
) -> None:
    """One ``exercise:completed`` push per recipient."""

    payload = build_exercise_completed_payload(exercise)
    for recipient_id in recipient_ids:
        relay.deliver(recipient_id, EXERCISE_COMPLETED, payload)


def publish_exercise_reminder(relay: EventRelay, *, from_user_id: int, to_user_id: int) -> None:
    relay.deliver(to_user_id, EXERCISE_REMINDER, {"fromUserId": from_user_id})
