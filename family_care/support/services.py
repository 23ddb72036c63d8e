"""Scripted support chat: every user message gets one canned bot reply."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import SupportMessage

if TYPE_CHECKING:  # import for type checking only
    from family_care.users.models import User

# (keywords, reply); first match wins.
CANNED_REPLIES: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("รหัสผ่าน", "password"),
        "หากลืมรหัสผ่าน ให้เข้าสู่ระบบด้วยเบอร์โทรและยืนยัน OTP ใหม่",
    ),
    (
        ("ออกกำลังกาย", "exercise"),
        "เคล็ดลับ: เริ่มจากท่าง่าย 5-10 นาที แล้วค่อยเพิ่มเวลา",
    ),
    (
        ("ติดต่อ", "contact"),
        "ทีมสนับสนุนจะติดต่อกลับภายใน 1 วันทำการ ขอบคุณค่ะ",
    ),
)
DEFAULT_REPLY = "ขอบคุณสำหรับข้อความ ทีมสนับสนุนได้รับข้อความแล้วค่ะ"


def auto_reply(text: str | None) -> str:
    lowered = (text or "").lower()
    for keywords, reply in CANNED_REPLIES:
        if any(keyword in lowered for keyword in keywords):
            return reply
    return DEFAULT_REPLY


def post_support_message(user: User, content: str) -> tuple[SupportMessage, SupportMessage]:
    question = SupportMessage.objects.create(
        user=user,
        role=user.role,
        content=content,
        is_bot=False,
    )
    answer = SupportMessage.objects.create(
        user=user,
        role=SupportMessage.BOT_ROLE,
        content=auto_reply(content),
        is_bot=True,
    )
    return question, answer
