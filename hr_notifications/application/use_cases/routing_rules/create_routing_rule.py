"""Use case for registering notification routing rules."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy.orm import Session

from hr_notifications.domain.entities import Route, RoutingRule
from hr_notifications.infrastructure.repositories import (
    RoutingRuleRepository,
    UserRepository,
)

from .validators import ensure_valid_conditions, ensure_valid_trigger


def create_routing_rule(
    session: Session,
    *,
    name: str,
    trigger: str,
    routes: Sequence[Route],
    conditions: dict[str, Any] | None = None,
    is_active: bool = True,
) -> RoutingRule:
    """Create a rule whose routes point at existing user accounts."""

    if not name or not name.strip():
        raise ValueError("Routing rule name is required")
    ensure_valid_trigger(trigger)
    ensure_valid_conditions(conditions)

    users = UserRepository(session)
    for route in routes:
        ensure_valid_conditions(route.conditions)
        if not users.exists(route.recipient_id):
            raise ValueError(f"Recipient user {route.recipient_id} does not exist")

    entity = RoutingRule(
        id=None,
        name=name.strip(),
        trigger=trigger,
        is_active=is_active,
        conditions=conditions or None,
        routes=list(routes),
    )
    return RoutingRuleRepository(session).create(entity)
