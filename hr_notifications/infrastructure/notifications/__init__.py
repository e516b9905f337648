"""Email delivery helpers for the infrastructure layer."""

from .dispatcher import (
    DeliveryDispatcher,
    delivery_dispatcher,
    get_delivery_dispatcher,
)
from .email_content import build_email_content, format_deadline

__all__ = [
    "DeliveryDispatcher",
    "delivery_dispatcher",
    "get_delivery_dispatcher",
    "build_email_content",
    "format_deadline",
]
