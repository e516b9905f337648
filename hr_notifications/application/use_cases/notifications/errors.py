"""Errors raised by the notification use cases."""

from __future__ import annotations


class ReferenceNotFoundError(ValueError):
    """A referenced employee or user does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} does not exist")


class EmployeeNotFoundError(ReferenceNotFoundError):
    def __init__(self, employee_id: str) -> None:
        super().__init__("Employee", employee_id)


class NotificationNotFoundError(ValueError):
    def __init__(self, notification_id: str) -> None:
        self.notification_id = notification_id
        super().__init__(f"Notification {notification_id} not found")


class NotificationAccessError(ValueError):
    """The acting user is not allowed to change the notification."""

    def __init__(self, notification_id: str, user_id: str) -> None:
        self.notification_id = notification_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not the recipient of notification {notification_id}"
        )


__all__ = [
    "EmployeeNotFoundError",
    "NotificationAccessError",
    "NotificationNotFoundError",
    "ReferenceNotFoundError",
]
