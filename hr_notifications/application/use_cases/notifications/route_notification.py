"""Use case for rule-based notification fan-out."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from hr_notifications.domain.entities import SYSTEM_SENDER, Notification, NotificationData
from hr_notifications.infrastructure.repositories import (
    EmployeeRepository,
    RoutingRuleRepository,
)

from .composer import compose_message
from .conditions import conditions_match
from .create_notification import Dispatcher, create_notification
from .default_routing import create_default_notification
from .errors import EmployeeNotFoundError

logger = logging.getLogger(__name__)


def route_notification(
    session: Session,
    trigger_type: str,
    employee_id: str,
    metadata: Mapping[str, Any] | None = None,
    *,
    dispatcher: Dispatcher | None = None,
) -> list[Notification]:
    """Notify every route of every active rule matching ``trigger_type``.

    Rules are expanded newest first and routes in their stored order; each
    pair whose conditions hold yields one notification. When nothing was
    created the default router adds exactly one notification.
    """

    employee = EmployeeRepository(session).get(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)

    rules = RoutingRuleRepository(session).list_active_by_trigger(trigger_type)
    notifications: list[Notification] = []

    for rule in rules:
        if not conditions_match(rule.conditions, employee, metadata):
            logger.debug("Routing rule %s skipped for employee %s", rule.id, employee.id)
            continue
        for route in rule.routes:
            if not conditions_match(route.conditions, employee, metadata):
                continue
            composed = compose_message(trigger_type, employee, metadata)
            notification = create_notification(
                session,
                NotificationData(
                    title=composed.title,
                    message=composed.message,
                    type=trigger_type,
                    priority=composed.priority,
                    recipient_id=route.recipient_id,
                    employee_id=employee.id,
                    sender=SYSTEM_SENDER,
                    deadline=composed.deadline,
                    action_url=composed.action_url,
                    metadata={
                        **(metadata or {}),
                        "routingRuleId": rule.id,
                        "routeId": route.id,
                    },
                ),
                dispatcher=dispatcher,
            )
            notifications.append(notification)

    if not notifications:
        logger.info(
            "No routing rule matched %s for employee %s; using default routing",
            trigger_type,
            employee.id,
        )
        notifications.append(
            create_default_notification(
                session, trigger_type, employee, metadata, dispatcher=dispatcher
            )
        )

    return notifications


__all__ = ["route_notification"]
