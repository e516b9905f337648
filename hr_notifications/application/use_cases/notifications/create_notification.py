"""Use case for persisting one notification and scheduling its email."""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.orm import Session

from hr_notifications.config import get_settings
from hr_notifications.domain.entities import (
    EmailDelivery,
    EmployeeSnapshot,
    Notification,
    NotificationData,
    NotificationPriority,
    NotificationStatus,
    UserSender,
    normalize_notification_type,
)
from hr_notifications.infrastructure.notifications import get_delivery_dispatcher
from hr_notifications.infrastructure.repositories import (
    EmployeeRepository,
    NotificationRepository,
    UserRepository,
)
from hr_notifications.utils import now_in_app_timezone

from .errors import ReferenceNotFoundError

logger = logging.getLogger(__name__)


class Dispatcher(Protocol):
    def dispatch(self, delivery: EmailDelivery) -> None: ...


def _validate_references(session: Session, data: NotificationData) -> str | None:
    """Check every referenced row exists and return the sender user id."""

    users = UserRepository(session)
    if data.employee_id and not EmployeeRepository(session).exists(data.employee_id):
        raise ReferenceNotFoundError("Employee", data.employee_id)

    if data.recipient_id and not users.exists(data.recipient_id):
        raise ReferenceNotFoundError("Recipient user", data.recipient_id)

    if isinstance(data.sender, UserSender):
        if not users.exists(data.sender.user_id):
            raise ReferenceNotFoundError("Sender user", data.sender.user_id)
        return data.sender.user_id
    return None


def _absolute_action_url(action_url: str | None) -> str | None:
    if not action_url:
        return None
    if action_url.startswith(("http://", "https://")):
        return action_url
    return f"{get_settings().app_base_url.rstrip('/')}{action_url}"


def build_email_delivery(
    session: Session, notification: Notification
) -> EmailDelivery | None:
    """Return the email job for ``notification`` when its recipient has an email."""

    if not notification.recipient_id:
        return None
    recipient = UserRepository(session).get(notification.recipient_id)
    if recipient is None or not recipient.email:
        return None

    snapshot = None
    if notification.employee_id:
        employee = EmployeeRepository(session).get(notification.employee_id)
        if employee is not None:
            snapshot = EmployeeSnapshot(
                first_name=employee.first_name,
                last_name=employee.last_name,
            )

    return EmailDelivery(
        notification_id=notification.id,
        notification_type=notification.type,
        to_email=recipient.email,
        title=notification.title,
        message=notification.message,
        priority=notification.priority,
        action_url=_absolute_action_url(notification.action_url),
        employee=snapshot,
        deadline=notification.deadline,
    )


def create_notification(
    session: Session,
    data: NotificationData,
    *,
    dispatcher: Dispatcher | None = None,
) -> Notification:
    """Persist ``data`` as a pending notification, then schedule its email.

    Referenced ids are checked before anything is written so callers get a
    :class:`ReferenceNotFoundError` naming the missing row. The email is
    handed to ``dispatcher`` only after the insert committed; its outcome
    never reaches the caller.
    """

    sender_id = _validate_references(session, data)

    entity = Notification(
        id=None,
        title=data.title,
        message=data.message,
        type=normalize_notification_type(data.type),
        priority=NotificationPriority.parse(data.priority) or NotificationPriority.NORMAL,
        status=NotificationStatus.PENDING,
        is_read=False,
        recipient_id=data.recipient_id,
        employee_id=data.employee_id,
        sender_id=sender_id,
        deadline=data.deadline,
        action_url=data.action_url,
        metadata=dict(data.metadata or {}),
        created_at=now_in_app_timezone(),
    )
    notification = NotificationRepository(session).create(entity)
    logger.info(
        "Created %s notification %s for recipient %s",
        notification.type,
        notification.id,
        notification.recipient_id,
    )

    try:
        delivery = build_email_delivery(session, notification)
        if delivery is not None:
            (dispatcher or get_delivery_dispatcher()).dispatch(delivery)
    except Exception:
        logger.exception(
            "Could not schedule email for notification %s", notification.id
        )

    return notification


__all__ = ["Dispatcher", "build_email_delivery", "create_notification"]
