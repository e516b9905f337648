"""Domain entities exposed by the application."""

from .email_delivery import EmailContent, EmailDelivery, EmployeeSnapshot
from .employee import UNKNOWN_DEPARTMENT, Department, Employee
from .notification import (
    SYSTEM_SENDER,
    Notification,
    NotificationData,
    NotificationPriority,
    NotificationStatus,
    NotificationType,
    Sender,
    SystemSender,
    UserSender,
    normalize_notification_type,
    parse_sender,
)
from .routing_rule import Route, RoutingRule
from .user import User

__all__ = [
    "Department",
    "EmailContent",
    "EmailDelivery",
    "Employee",
    "EmployeeSnapshot",
    "Notification",
    "NotificationData",
    "NotificationPriority",
    "NotificationStatus",
    "NotificationType",
    "Route",
    "RoutingRule",
    "Sender",
    "SystemSender",
    "SYSTEM_SENDER",
    "UNKNOWN_DEPARTMENT",
    "User",
    "UserSender",
    "normalize_notification_type",
    "parse_sender",
]
