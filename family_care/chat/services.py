from __future__ import annotations

from typing import TYPE_CHECKING

from django.db.models import Q

from family_care.contacts.services import contact_ids_of
from family_care.realtime.events.chat import publish_message_created

from .models import Message

if TYPE_CHECKING:  # import for type checking only
    from django.db.models import QuerySet

    from family_care.realtime.relay import EventRelay


def conversation(user_id: int, contact_id: int) -> QuerySet[Message]:
    return Message.objects.filter(
        Q(sender_id=user_id, recipient_id=contact_id)
        | Q(sender_id=contact_id, recipient_id=user_id)
    ).order_by("id")


def send_direct_message(
    relay: EventRelay,
    *,
    sender_id: int,
    recipient_id: int,
    content: str,
) -> Message:
    message = Message.objects.create(
        sender_id=sender_id,
        recipient_id=recipient_id,
        is_group=False,
        content=content,
    )
    publish_message_created(relay, message)
    return message


def send_group_message(relay: EventRelay, *, sender_id: int, content: str) -> list[Message]:
    """Store one row per contact, then push each one.

    Rows are written one statement at a time; a failure part-way leaves the
    rows already written in place.
    """

    messages = [
        Message.objects.create(
            sender_id=sender_id,
            recipient_id=recipient_id,
            is_group=True,
            content=content,
        )
        for recipient_id in contact_ids_of(sender_id)
    ]
    for message in messages:
        publish_message_created(relay, message, include_id=False)
    return messages
