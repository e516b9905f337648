"""Notification routing, composition and lifecycle use cases."""

from .composer import ComposedMessage, calculate_deadline, compose_message, resolve_priority
from .conditions import conditions_match
from .create_notification import build_email_delivery, create_notification
from .default_routing import create_default_notification, resolve_default_recipient
from .errors import (
    EmployeeNotFoundError,
    NotificationAccessError,
    NotificationNotFoundError,
    ReferenceNotFoundError,
)
from .list_notifications import (
    NotificationListing,
    NotificationStatistics,
    list_notifications,
)
from .mark_as_read import mark_as_read
from .route_notification import route_notification
from .update_status import parse_status, update_status

__all__ = [
    "ComposedMessage",
    "EmployeeNotFoundError",
    "NotificationAccessError",
    "NotificationListing",
    "NotificationNotFoundError",
    "NotificationStatistics",
    "ReferenceNotFoundError",
    "build_email_delivery",
    "calculate_deadline",
    "compose_message",
    "conditions_match",
    "create_default_notification",
    "create_notification",
    "list_notifications",
    "mark_as_read",
    "parse_status",
    "resolve_default_recipient",
    "resolve_priority",
    "route_notification",
    "update_status",
]
