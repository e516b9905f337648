"""Composition of notification content from an HR event."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from hr_notifications.domain.entities import Employee, NotificationPriority
from hr_notifications.domain.policies import get_policy
from hr_notifications.utils import deadline_after

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComposedMessage:
    title: str
    message: str
    priority: NotificationPriority
    deadline: datetime
    action_url: str


def resolve_priority(
    notification_type: str, metadata: Mapping[str, Any] | None = None
) -> NotificationPriority:
    """Return ``metadata['priority']`` when valid, else the type default."""

    requested = (metadata or {}).get("priority")
    if requested is not None:
        priority = NotificationPriority.parse(requested)
        if priority is not None:
            return priority
        logger.warning(
            "Ignoring unknown priority %r for %s notification", requested, notification_type
        )
    return get_policy(notification_type).priority


def calculate_deadline(
    notification_type: str,
    *,
    now: datetime | None = None,
    delay_minutes: int = 0,
) -> datetime:
    policy = get_policy(notification_type)
    return deadline_after(
        policy.deadline_offset + timedelta(minutes=delay_minutes), start=now
    )


def compose_message(
    notification_type: str,
    employee: Employee,
    metadata: Mapping[str, Any] | None = None,
    *,
    now: datetime | None = None,
    delay_minutes: int = 0,
) -> ComposedMessage:
    """Build title, message, priority, deadline and action link for an event.

    The result only depends on the arguments (and on the clock when ``now`` is
    omitted). Unknown types fall back to the generic HR notification wording.
    """

    policy = get_policy(notification_type)
    name = employee.full_name
    return ComposedMessage(
        title=policy.render_title(name),
        message=policy.render_message(name, employee.department_name),
        priority=resolve_priority(notification_type, metadata),
        deadline=calculate_deadline(
            notification_type, now=now, delay_minutes=delay_minutes
        ),
        action_url=policy.render_action_url(employee.id),
    )


__all__ = ["ComposedMessage", "calculate_deadline", "compose_message", "resolve_priority"]
