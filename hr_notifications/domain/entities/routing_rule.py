"""Domain entities for notification routing rules."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Route:
    """One recipient binding inside a routing rule."""

    id: str | None
    recipient_id: str
    rule_id: str | None = None
    conditions: dict[str, Any] | None = None
    position: int = 0


@dataclass
class RoutingRule:
    """Binds a trigger type to the routes that must be notified."""

    id: str | None
    name: str
    trigger: str
    is_active: bool = True
    conditions: dict[str, Any] | None = None
    created_at: datetime | None = None
    routes: list[Route] = field(default_factory=list)


__all__ = ["Route", "RoutingRule"]
