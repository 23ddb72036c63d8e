import pytest

from family_care.support.services import CANNED_REPLIES
from family_care.support.services import DEFAULT_REPLY
from family_care.support.services import auto_reply

PASSWORD_REPLY = CANNED_REPLIES[0][1]
EXERCISE_REPLY = CANNED_REPLIES[1][1]
CONTACT_REPLY = CANNED_REPLIES[2][1]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("I forgot my PASSWORD", PASSWORD_REPLY),
        ("ลืมรหัสผ่าน", PASSWORD_REPLY),
        ("Which exercise is best?", EXERCISE_REPLY),
        ("อยากออกกำลังกาย", EXERCISE_REPLY),
        ("please contact me", CONTACT_REPLY),
        ("password for exercise", PASSWORD_REPLY),
        ("hello", DEFAULT_REPLY),
        ("", DEFAULT_REPLY),
        (None, DEFAULT_REPLY),
    ],
)
def test_auto_reply(text, expected):
    assert auto_reply(text) == expected
