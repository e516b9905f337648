"""Aggregate application use cases."""

from .notifications import create_notification, route_notification

__all__ = [
    "create_notification",
    "route_notification",
]
