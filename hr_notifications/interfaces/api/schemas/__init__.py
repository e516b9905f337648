from .notification import (
    NotificationCreate,
    NotificationListRead,
    NotificationMarkReadRequest,
    NotificationRead,
    NotificationRouteRequest,
    NotificationStatisticsRead,
    NotificationStatusUpdate,
)
from .routing_rule import RouteBase, RouteRead, RoutingRuleCreate, RoutingRuleRead

__all__ = [
    "NotificationCreate",
    "NotificationListRead",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotificationRouteRequest",
    "NotificationStatisticsRead",
    "NotificationStatusUpdate",
    "RouteBase",
    "RouteRead",
    "RoutingRuleCreate",
    "RoutingRuleRead",
]
