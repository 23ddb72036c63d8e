from unittest import mock

import pytest
from django.db import DatabaseError

from family_care.exercises.services import today
from family_care.notifications.models import NotificationSettings
from family_care.notifications.services import family_contact_ids
from family_care.notifications.services import notify_family_of_exercise
from family_care.realtime.events.exercises import EXERCISE_COMPLETED
from family_care.realtime.socketio import get_relay
from tests.factories import create_exercise
from tests.factories import create_family
from tests.factories import create_user
from tests.factories import link


@pytest.mark.django_db
def test_family_contact_ids_filters_by_role(user):
    son = create_family("Niran")
    friend = create_user("Lek")
    link(user, son, friend)

    assert family_contact_ids(user.pk) == [son.pk]


@pytest.mark.django_db
def test_fan_out_attempts_every_family_contact(realtime, user):
    son = create_family("Niran")
    daughter = create_family("Pim")
    link(user, son, daughter)
    realtime.connect(daughter)
    exercise = create_exercise(user, date=today())

    assert notify_family_of_exercise(get_relay(), exercise) == 2
    assert len(realtime.pushes(EXERCISE_COMPLETED)) == 1


@pytest.mark.django_db
def test_missing_settings_row_disables_fan_out(realtime, user):
    son = create_family("Niran")
    link(user, son)
    realtime.connect(son)
    NotificationSettings.objects.filter(user=user).delete()
    exercise = create_exercise(user, date=today())

    assert notify_family_of_exercise(get_relay(), exercise) == 0
    assert realtime.server.emitted == []


@pytest.mark.django_db
def test_settings_read_failure_is_logged_and_swallowed(realtime, user, caplog):
    son = create_family("Niran")
    link(user, son)
    realtime.connect(son)
    exercise = create_exercise(user, date=today())

    with mock.patch.object(
        NotificationSettings.objects,
        "filter",
        side_effect=DatabaseError("disk I/O error"),
    ):
        sent = notify_family_of_exercise(get_relay(), exercise)

    assert sent == 0
    assert realtime.server.emitted == []
    assert "Exercise fan-out skipped" in caplog.text


@pytest.mark.django_db
def test_signal_creates_settings_for_new_user():
    user = create_user("Fresh")

    row = NotificationSettings.objects.get(user=user)
    assert row.elderly_notify_exercise
    assert row.elderly_notify_checkup
    assert row.family_notify_parent_done
