"""Tests for read and status transitions of notifications."""

from __future__ import annotations

import pytest

from hr_notifications.application.use_cases.notifications import (
    NotificationAccessError,
    NotificationNotFoundError,
    create_notification,
    mark_as_read,
    parse_status,
    update_status,
)
from hr_notifications.domain.entities import NotificationData, NotificationStatus


@pytest.fixture()
def notification(session, make_user, dispatcher):
    recipient = make_user()
    return create_notification(
        session,
        NotificationData(
            title="Deadline Reminder - Jane Doe",
            message="Important deadline approaching.",
            type="DEADLINE",
            recipient_id=recipient.id,
        ),
        dispatcher=dispatcher,
    )


def test_recipient_marks_notification_as_read(session, notification) -> None:
    updated = mark_as_read(session, notification.id, notification.recipient_id)

    assert updated.is_read is True
    assert updated.status is NotificationStatus.PENDING


def test_marking_twice_is_harmless(session, notification) -> None:
    mark_as_read(session, notification.id, notification.recipient_id)
    again = mark_as_read(session, notification.id, notification.recipient_id)

    assert again.is_read is True


def test_other_users_cannot_mark_as_read(session, notification, make_user) -> None:
    intruder = make_user()

    with pytest.raises(NotificationAccessError):
        mark_as_read(session, notification.id, intruder.id)


def test_mark_unknown_notification(session) -> None:
    with pytest.raises(NotificationNotFoundError):
        mark_as_read(session, "missing", "user")


@pytest.mark.parametrize("status", ["sent", "DELIVERED", " dismissed ", "escalated"])
def test_update_status_accepts_any_known_status(session, notification, status) -> None:
    updated = update_status(session, notification.id, status)

    assert updated.status.value == status.strip().lower()
    assert updated.acknowledged_at is None


def test_acknowledge_by_recipient_records_timestamp(session, notification) -> None:
    updated = update_status(
        session, notification.id, "acknowledged", notification.recipient_id
    )

    assert updated.status is NotificationStatus.ACKNOWLEDGED
    assert updated.acknowledged_at is not None


def test_acknowledge_by_other_user_is_rejected(session, notification, make_user) -> None:
    intruder = make_user()

    with pytest.raises(NotificationAccessError):
        update_status(session, notification.id, "acknowledged", intruder.id)


def test_unknown_status_is_rejected(session, notification) -> None:
    with pytest.raises(ValueError, match="Expected one of"):
        update_status(session, notification.id, "archived")


def test_update_unknown_notification(session) -> None:
    with pytest.raises(NotificationNotFoundError):
        update_status(session, "missing", "sent")


def test_parse_status_passes_members_through() -> None:
    assert parse_status(NotificationStatus.SENT) is NotificationStatus.SENT
