"""Fallback recipient selection used when no routing rule applies."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from hr_notifications.domain.entities import (
    SYSTEM_SENDER,
    Employee,
    Notification,
    NotificationData,
)
from hr_notifications.infrastructure.repositories import EmployeeRepository

from .composer import compose_message
from .create_notification import Dispatcher, create_notification

logger = logging.getLogger(__name__)

HR_POSITION_KEYWORDS = ("HR Manager", "Human Resources")
HR_DEPARTMENT_KEYWORDS = ("HR",)


def resolve_default_recipient(session: Session, employee: Employee) -> str | None:
    """Return the supervisor's account, else the first HR contact's account."""

    repository = EmployeeRepository(session)

    if employee.supervisor_id:
        supervisor = repository.get(employee.supervisor_id)
        if supervisor is not None and supervisor.user_id:
            return supervisor.user_id
        logger.warning(
            "Supervisor %s of employee %s has no linked user account",
            employee.supervisor_id,
            employee.id,
        )

    hr_contact = repository.find_first_hr_contact(
        position_keywords=HR_POSITION_KEYWORDS,
        department_keywords=HR_DEPARTMENT_KEYWORDS,
    )
    if hr_contact is None:
        return None
    if not hr_contact.user_id:
        logger.warning(
            "HR contact %s has no linked user account; ignoring it", hr_contact.id
        )
        return None
    return hr_contact.user_id


def create_default_notification(
    session: Session,
    notification_type: str,
    employee: Employee,
    metadata: Mapping[str, Any] | None = None,
    *,
    dispatcher: Dispatcher | None = None,
) -> Notification:
    """Create the single fallback notification for ``employee``."""

    recipient_id = resolve_default_recipient(session, employee)
    if recipient_id is None:
        logger.warning(
            "No default recipient for %s notification about employee %s; "
            "storing it without a recipient. Check supervisor and HR directory data.",
            notification_type,
            employee.id,
        )

    composed = compose_message(notification_type, employee, metadata)
    return create_notification(
        session,
        NotificationData(
            title=composed.title,
            message=composed.message,
            type=notification_type,
            priority=composed.priority,
            recipient_id=recipient_id,
            employee_id=employee.id,
            sender=SYSTEM_SENDER,
            deadline=composed.deadline,
            action_url=composed.action_url,
            metadata={**(metadata or {}), "isDefault": True},
        ),
        dispatcher=dispatcher,
    )


__all__ = ["create_default_notification", "resolve_default_recipient"]
