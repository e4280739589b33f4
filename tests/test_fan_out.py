"""Tests for turning one event trigger into per-recipient deliveries."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.use_cases.notifications import fan_out
from app.application.use_cases.preferences import resolve_preferences, update_preferences
from app.domain.entities import Group, NotificationType, User
from app.domain.exceptions import NotFoundError
from app.infrastructure.delivery import DeliveryDispatcher
from app.infrastructure.repositories import (
    GroupRepository,
    NotificationPreferenceRepository,
    NotificationRepository,
    UserRepository,
)
from conftest import NOW, RecordingSink, store_event


def _types_for(session, user_id):
    return [n.notification_type for n in NotificationRepository(session).list_for_user(user_id)]


@pytest.mark.parametrize(
    "trigger", [NotificationType.EVENT_CREATED, NotificationType.EVENT_REMINDER]
)
def test_members_without_preferences_get_notification_and_email(
    session, study_group, dispatcher, sink, trigger
):
    event = store_event(session, study_group, NOW + timedelta(days=1))

    fan_out(session, event, trigger, dispatcher=dispatcher)

    for user in study_group.active_users:
        assert _types_for(session, user.id) == [trigger]
    assert sink.addresses() == study_group.active_emails


def test_pending_members_are_not_part_of_the_audience(session, study_group, dispatcher, sink):
    event = store_event(session, study_group, NOW + timedelta(days=1))

    fan_out(session, event, NotificationType.EVENT_CREATED, dispatcher=dispatcher)

    assert _types_for(session, study_group.pending.id) == []
    assert study_group.pending.email not in sink.addresses()


def test_reminder_opt_out_suppresses_both_channels(session, study_group, dispatcher, sink):
    update_preferences(
        session,
        study_group.bob.id,
        notify_on_new_event=True,
        notify_on_reminder=False,
        email_enabled=True,
    )
    event = store_event(session, study_group, NOW + timedelta(days=1))

    fan_out(session, event, NotificationType.EVENT_REMINDER, dispatcher=dispatcher)

    assert _types_for(session, study_group.bob.id) == []
    assert study_group.bob.email not in sink.addresses()
    assert _types_for(session, study_group.carol.id) == [NotificationType.EVENT_REMINDER]


def test_email_disabled_keeps_in_app_announcement(session, study_group, dispatcher, sink):
    update_preferences(
        session,
        study_group.carol.id,
        notify_on_new_event=True,
        notify_on_reminder=True,
        email_enabled=False,
    )
    event = store_event(session, study_group, NOW + timedelta(days=1))

    fan_out(session, event, NotificationType.EVENT_CREATED, dispatcher=dispatcher)

    assert _types_for(session, study_group.carol.id) == [NotificationType.EVENT_CREATED]
    assert study_group.carol.email not in [address for address, _, _ in sink.attempts]


def test_creation_announcement_ignores_new_event_flag_for_in_app(
    session, study_group, dispatcher, sink
):
    update_preferences(
        session,
        study_group.bob.id,
        notify_on_new_event=False,
        notify_on_reminder=True,
        email_enabled=True,
    )
    event = store_event(session, study_group, NOW + timedelta(days=1))

    fan_out(session, event, NotificationType.EVENT_CREATED, dispatcher=dispatcher)

    assert _types_for(session, study_group.bob.id) == [NotificationType.EVENT_CREATED]
    assert study_group.bob.email not in sink.addresses()


def test_one_failing_delivery_does_not_block_the_others(session, study_group, caplog):
    failing_sink = RecordingSink(failing={study_group.bob.email})
    event = store_event(session, study_group, NOW + timedelta(days=1))

    with caplog.at_level("WARNING"):
        fan_out(
            session,
            event,
            NotificationType.EVENT_REMINDER,
            dispatcher=DeliveryDispatcher(failing_sink, max_workers=0),
        )

    for user in study_group.active_users:
        assert _types_for(session, user.id) == [NotificationType.EVENT_REMINDER]
    assert sorted(address for address, _, _ in failing_sink.attempts) == study_group.active_emails
    assert failing_sink.addresses() == sorted(
        email for email in study_group.active_emails if email != study_group.bob.email
    )
    assert "bob@example.com" in caplog.text


def test_failing_deliveries_on_worker_pool_are_isolated(session, study_group):
    failing_sink = RecordingSink(failing={study_group.admin.email})
    pool = DeliveryDispatcher(failing_sink, max_workers=3)
    event = store_event(session, study_group, NOW + timedelta(days=1))

    try:
        fan_out(session, event, NotificationType.EVENT_CREATED, dispatcher=pool)
        pool.drain(timeout=5)
    finally:
        pool.shutdown()

    assert len(failing_sink.attempts) == 3
    assert failing_sink.addresses() == [study_group.bob.email, study_group.carol.email]


def test_group_without_active_members_is_a_no_op(session, study_group, dispatcher, sink):
    users = UserRepository(session)
    lonely_admin = users.create(User(id=None, name="Eve", email="eve@example.com"))
    empty = GroupRepository(session).create(Group(id=None, name="Empty", created_by=lonely_admin.id))
    event = store_event(session, study_group, NOW + timedelta(days=1))
    event.group_id = empty.id

    fan_out(session, event, NotificationType.EVENT_CREATED, dispatcher=dispatcher)

    assert sink.attempts == []
    assert _types_for(session, lonely_admin.id) == []


def test_missing_group_aborts_without_side_effects(session, study_group, dispatcher, sink):
    event = store_event(session, study_group, NOW + timedelta(days=1))
    event.group_id = 9999

    with pytest.raises(NotFoundError):
        fan_out(session, event, NotificationType.EVENT_CREATED, dispatcher=dispatcher)

    assert sink.attempts == []
    for user in study_group.active_users:
        assert _types_for(session, user.id) == []


def test_members_without_email_only_get_in_app(session, study_group, dispatcher, sink):
    no_mail = UserRepository(session).create(User(id=None, name="Frank", email=None))
    GroupRepository(session).add_member(study_group.group.id, no_mail.id)
    event = store_event(session, study_group, NOW + timedelta(days=1))

    fan_out(session, event, NotificationType.EVENT_REMINDER, dispatcher=dispatcher)

    assert _types_for(session, no_mail.id) == [NotificationType.EVENT_REMINDER]
    assert sink.addresses() == study_group.active_emails


def test_audience_reflects_membership_at_call_time(session, study_group, dispatcher, sink):
    event = store_event(session, study_group, NOW + timedelta(days=1))
    fan_out(session, event, NotificationType.EVENT_CREATED, dispatcher=dispatcher)

    GroupRepository(session).remove_member(study_group.group.id, study_group.carol.id)
    fan_out(session, event, NotificationType.EVENT_REMINDER, dispatcher=dispatcher)

    assert _types_for(session, study_group.carol.id) == [NotificationType.EVENT_CREATED]
    assert set(_types_for(session, study_group.bob.id)) == {
        NotificationType.EVENT_CREATED,
        NotificationType.EVENT_REMINDER,
    }


def test_notifications_carry_event_correlation(session, study_group, dispatcher, sink):
    event = store_event(session, study_group, NOW + timedelta(days=1), title="Proofs")

    fan_out(session, event, NotificationType.EVENT_REMINDER, dispatcher=dispatcher)

    (notification,) = NotificationRepository(session).list_for_user(study_group.bob.id)
    assert notification.title == "Event Reminder: Proofs"
    assert notification.message == "Your study session 'Proofs' starts soon."
    assert notification.event_id == event.id
    assert notification.group_id == study_group.group.id
    assert notification.is_read is False
    assert notification.read_at is None
    subjects = {subject for _, subject, _ in sink.sent}
    assert subjects == {"Reminder: Proofs starts soon"}


def test_resolving_preferences_never_creates_a_row(session, study_group, dispatcher):
    event = store_event(session, study_group, NOW + timedelta(days=1))

    preference = resolve_preferences(session, study_group.bob.id)
    fan_out(session, event, NotificationType.EVENT_CREATED, dispatcher=dispatcher)

    assert preference.notify_on_new_event and preference.notify_on_reminder and preference.email_enabled
    assert NotificationPreferenceRepository(session).get_for_user(study_group.bob.id) is None
