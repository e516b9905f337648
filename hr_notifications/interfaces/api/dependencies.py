"""FastAPI dependency utilities."""

from hr_notifications.infrastructure.notifications import (
    DeliveryDispatcher,
    get_delivery_dispatcher,
)


def get_dispatcher() -> DeliveryDispatcher:
    """Return the dispatcher used to email newly created notifications."""

    return get_delivery_dispatcher()
