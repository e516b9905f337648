"""Use case for moving a notification to another status."""

from __future__ import annotations

from sqlalchemy.orm import Session

from hr_notifications.domain.entities import Notification, NotificationStatus
from hr_notifications.infrastructure.repositories import NotificationRepository
from hr_notifications.utils import now_in_app_timezone

from .errors import NotificationAccessError, NotificationNotFoundError


def parse_status(status: str | NotificationStatus) -> NotificationStatus:
    if isinstance(status, NotificationStatus):
        return status
    try:
        return NotificationStatus((status or "").strip().lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in NotificationStatus)
        raise ValueError(f"Unknown notification status '{status}'. Expected one of: {allowed}") from exc


def update_status(
    session: Session,
    notification_id: str,
    status: str | NotificationStatus,
    user_id: str | None = None,
) -> Notification:
    """Change the status of a notification.

    Acknowledging with a ``user_id`` requires that user to be the recipient
    and records ``acknowledged_at``.
    """

    new_status = parse_status(status)
    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None:
        raise NotificationNotFoundError(notification_id)

    patch: dict[str, object] = {"status": new_status}
    if new_status is NotificationStatus.ACKNOWLEDGED and user_id:
        if notification.recipient_id != user_id:
            raise NotificationAccessError(notification_id, user_id)
        patch["acknowledged_at"] = now_in_app_timezone()

    return repository.update(notification_id, patch)


__all__ = ["parse_status", "update_status"]
