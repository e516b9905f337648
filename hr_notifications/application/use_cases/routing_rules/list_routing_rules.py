"""Use case for listing routing rules."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from hr_notifications.domain.entities import RoutingRule
from hr_notifications.infrastructure.repositories import RoutingRuleRepository


def list_routing_rules(
    session: Session, *, trigger: str | None = None
) -> Sequence[RoutingRule]:
    """Return every rule, newest first, optionally restricted to ``trigger``."""

    return RoutingRuleRepository(session).list(trigger=trigger)
