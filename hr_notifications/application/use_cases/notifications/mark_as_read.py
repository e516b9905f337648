"""Use case for marking a notification as read by its recipient."""

from sqlalchemy.orm import Session

from hr_notifications.domain.entities import Notification
from hr_notifications.infrastructure.repositories import NotificationRepository

from .errors import NotificationAccessError, NotificationNotFoundError


def mark_as_read(session: Session, notification_id: str, user_id: str) -> Notification:
    """Set ``is_read`` when ``user_id`` is the notification's recipient."""

    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None:
        raise NotificationNotFoundError(notification_id)
    if not user_id or notification.recipient_id != user_id:
        raise NotificationAccessError(notification_id, user_id)
    if notification.is_read:
        return notification
    return repository.update(notification_id, {"is_read": True})
