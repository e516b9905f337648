"""Tests for the email subject and body presentation."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from hr_notifications.domain.entities import (
    EmailDelivery,
    EmployeeSnapshot,
    NotificationPriority,
)
from hr_notifications.infrastructure.notifications import (
    build_email_content,
    format_deadline,
)

DEADLINE = datetime(2026, 10, 25, 12, 0, tzinfo=timezone.utc)


def _delivery(**overrides) -> EmailDelivery:
    values = {
        "notification_id": "notif-1",
        "notification_type": "PERFORMANCE_PLAN",
        "to_email": "manager@example.com",
        "title": "Performance Plan Required - Jane Doe",
        "message": "A performance improvement plan needs to be created.",
        "priority": NotificationPriority.NORMAL,
        "action_url": "http://localhost:3000/hr/performance/plans/emp-1",
        "employee": EmployeeSnapshot(first_name="Jane", last_name="Doe"),
        "deadline": DEADLINE,
    }
    values.update(overrides)
    return EmailDelivery(**values)


def test_format_deadline() -> None:
    assert format_deadline(datetime(2026, 3, 5)) == "March 5, 2026"


def test_performance_plan_content() -> None:
    content = build_email_content(_delivery())

    assert content.subject == "Performance Plan Required - Jane Doe"
    assert content.action_button_text == "View Performance Plan"
    assert content.body == (
        "A performance improvement plan needs to be created.\n\n"
        "Employee: Jane Doe\n"
        "Deadline: October 25, 2026\n\n"
        "Please review and create the performance plan as soon as possible."
    )


def test_escalation_subject_uses_fallback_without_employee() -> None:
    content = build_email_content(
        _delivery(
            notification_type="ESCALATION",
            priority=NotificationPriority.CRITICAL,
            employee=None,
        )
    )

    assert content.subject == "\U0001f6a8 Escalation Required - Urgent"
    assert content.action_button_text == "Respond Now"
    assert content.body.startswith("[CRITICAL PRIORITY]\n\n")
    assert "Employee:" not in content.body


def test_high_priority_banner() -> None:
    content = build_email_content(
        _delivery(notification_type="DEADLINE", priority=NotificationPriority.HIGH)
    )

    assert content.body.startswith("[HIGH PRIORITY]\n\n")
    assert "Related to: Jane Doe" in content.body
    assert "⚠️ Deadline: October 25, 2026" in content.body


@pytest.mark.parametrize("priority", [NotificationPriority.LOW, NotificationPriority.NORMAL])
def test_no_banner_for_routine_priorities(priority) -> None:
    content = build_email_content(_delivery(priority=priority))

    assert not content.body.startswith("[")


def test_unknown_type_keeps_title_as_subject() -> None:
    content = build_email_content(
        _delivery(notification_type="ONBOARDING", title="Welcome Jane", deadline=None)
    )

    assert content.subject == "Welcome Jane"
    assert content.action_button_text == "View Notification"
    assert content.body == (
        "A performance improvement plan needs to be created.\n\n"
        "Related Employee: Jane Doe"
    )
