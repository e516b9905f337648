"""Tests for the notification message composer."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from hr_notifications.application.use_cases.notifications import (
    calculate_deadline,
    compose_message,
    resolve_priority,
)
from hr_notifications.domain.entities import Department, Employee, NotificationPriority

NOW = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)


def _employee(**overrides) -> Employee:
    values = {
        "id": "emp-1",
        "first_name": "Jane",
        "last_name": "Doe",
        "position": "Analyst",
        "department": "Engineering",
    }
    values.update(overrides)
    return Employee(**values)


def test_compose_performance_plan_message() -> None:
    composed = compose_message("PERFORMANCE_PLAN", _employee(), now=NOW)

    assert composed.title == "Performance Plan Required - Jane Doe"
    assert composed.message == (
        "A performance improvement plan needs to be created for Jane Doe in "
        "Engineering. Please review and take action."
    )
    assert composed.priority is NotificationPriority.NORMAL
    assert composed.deadline == NOW + timedelta(days=7)
    assert composed.action_url == "/hr/performance/plans/emp-1"


@pytest.mark.parametrize(
    ("notification_type", "priority", "offset", "action_url"),
    [
        ("APPRAISAL", NotificationPriority.NORMAL, timedelta(days=14), "/hr/performance/appraisals/emp-1"),
        ("TRAINING", NotificationPriority.LOW, timedelta(days=30), "/hr/training/assignments/emp-1"),
        ("DEADLINE", NotificationPriority.HIGH, timedelta(days=1), "/hr/employees/emp-1"),
        ("ESCALATION", NotificationPriority.CRITICAL, timedelta(hours=2), "/hr/employees/emp-1"),
        ("APPROVAL", NotificationPriority.HIGH, timedelta(days=3), "/hr/approvals/emp-1"),
    ],
)
def test_compose_uses_type_defaults(notification_type, priority, offset, action_url) -> None:
    composed = compose_message(notification_type, _employee(), now=NOW)

    assert composed.priority is priority
    assert composed.deadline == NOW + offset
    assert composed.action_url == action_url


def test_compose_escalation_wording() -> None:
    composed = compose_message("ESCALATION", _employee(), now=NOW)

    assert composed.title == "Escalation Required - Jane Doe"
    assert "Immediate supervisor attention required." in composed.message


def test_unknown_type_uses_generic_wording() -> None:
    composed = compose_message("ONBOARDING", _employee(), now=NOW)

    assert composed.title == "HR Notification - Jane Doe"
    assert composed.message == "HR action required for Jane Doe in Engineering."
    assert composed.priority is NotificationPriority.NORMAL
    assert composed.deadline == NOW + timedelta(days=7)
    assert composed.action_url == "/hr/employees/emp-1"


def test_type_lookup_is_case_insensitive() -> None:
    composed = compose_message("  training ", _employee(), now=NOW)

    assert composed.title == "Training Assignment - Jane Doe"
    assert composed.priority is NotificationPriority.LOW


def test_department_reference_wins_over_label() -> None:
    employee = _employee(department_ref=Department(id="dep-1", name="Finance"))

    composed = compose_message("APPRAISAL", employee, now=NOW)

    assert "in Finance." in composed.message


def test_missing_department_is_reported_as_unknown() -> None:
    composed = compose_message("APPRAISAL", _employee(department=None), now=NOW)

    assert "in Unknown Department." in composed.message


def test_metadata_priority_overrides_default() -> None:
    composed = compose_message("TRAINING", _employee(), {"priority": "CRITICAL"}, now=NOW)

    assert composed.priority is NotificationPriority.CRITICAL


def test_invalid_metadata_priority_is_ignored(caplog) -> None:
    with caplog.at_level("WARNING"):
        priority = resolve_priority("DEADLINE", {"priority": "urgent"})

    assert priority is NotificationPriority.HIGH
    assert "urgent" in caplog.text


def test_delay_shifts_deadline() -> None:
    deadline = calculate_deadline("ESCALATION", now=NOW, delay_minutes=30)

    assert deadline == NOW + timedelta(hours=2, minutes=30)


def test_compose_is_deterministic_for_fixed_clock() -> None:
    first = compose_message("APPROVAL", _employee(), {"priority": "low"}, now=NOW)
    second = compose_message("APPROVAL", _employee(), {"priority": "low"}, now=NOW)

    assert first == second
