"""Repository implementations for infrastructure layer."""

from .employee_repository import EmployeeRepository
from .notification_repository import NotificationRepository
from .routing_rule_repository import RoutingRuleRepository
from .user_repository import UserRepository

__all__ = [
    "EmployeeRepository",
    "NotificationRepository",
    "RoutingRuleRepository",
    "UserRepository",
]
