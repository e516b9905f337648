"""Tests for repository behaviour not covered through the use cases."""

from __future__ import annotations

import pytest

from hr_notifications.domain.entities import NotificationStatus, Route, RoutingRule
from hr_notifications.infrastructure.repositories import (
    EmployeeRepository,
    NotificationRepository,
    RoutingRuleRepository,
)


def test_employee_department_reference_is_loaded(session, make_employee) -> None:
    department = EmployeeRepository(session).create_department("People Operations")
    employee = make_employee(department="Legacy label", department_id=department.id)

    loaded = EmployeeRepository(session).get(employee.id)

    assert loaded.department_ref is not None
    assert loaded.department_name == "People Operations"


def test_routing_rule_round_trip(session, make_user) -> None:
    user = make_user()
    repository = RoutingRuleRepository(session)
    created = repository.create(
        RoutingRule(
            id=None,
            name="Escalations",
            trigger="escalation",
            conditions={"department": "Engineering"},
            routes=[Route(id=None, recipient_id=user.id)],
        )
    )

    loaded = repository.get(created.id)

    assert loaded.trigger == "ESCALATION"
    assert loaded.conditions == {"department": "Engineering"}
    assert loaded.routes[0].rule_id == created.id
    assert repository.get("missing") is None


def test_active_rules_by_trigger_skip_inactive(session, make_user) -> None:
    user = make_user()
    repository = RoutingRuleRepository(session)
    repository.create(
        RoutingRule(
            id=None,
            name="Off",
            trigger="TRAINING",
            is_active=False,
            routes=[Route(id=None, recipient_id=user.id)],
        )
    )

    assert repository.list_active_by_trigger("training") == []
    assert len(repository.list(trigger="TRAINING")) == 1


def test_update_unknown_notification_raises(session) -> None:
    with pytest.raises(ValueError):
        NotificationRepository(session).update("missing", {"status": NotificationStatus.SENT})
