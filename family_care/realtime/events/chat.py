from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:  # import for type checking only
    from family_care.chat.models import Message
    from family_care.realtime.relay import EventRelay

MESSAGE_NEW = "message:new"


def build_message_payload(message: Message, *, include_id: bool = True) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "fromUserId": message.sender_id,
        "toUserId": message.recipient_id,
        "content": message.content,
        "isGroup": message.is_group,
    }
    if include_id:
        payload = {"id": message.id, **payload}
    return payload


def publish_message_created(
    relay: EventRelay,
    message: Message,
    *,
    include_id: bool = True,
) -> None:
    """Push a stored message to its recipient if they are connected."""

    if message.recipient_id is None:
        return
    relay.deliver(
        message.recipient_id,
        MESSAGE_NEW,
        build_message_payload(message, include_id=include_id),
    )
