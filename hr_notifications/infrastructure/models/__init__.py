"""ORM models used by the application infrastructure."""

from .department import DepartmentModel
from .employee import EmployeeModel
from .notification import NotificationModel
from .routing_rule import RouteModel, RoutingRuleModel
from .user import UserModel

__all__ = [
    "DepartmentModel",
    "EmployeeModel",
    "NotificationModel",
    "RouteModel",
    "RoutingRuleModel",
    "UserModel",
]
