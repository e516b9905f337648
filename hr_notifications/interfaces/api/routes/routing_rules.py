"""Endpoints to register and inspect notification routing rules."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from hr_notifications.application.use_cases.routing_rules import (
    create_routing_rule as create_routing_rule_uc,
    list_routing_rules as list_routing_rules_uc,
)
from hr_notifications.domain.entities import Route
from hr_notifications.infrastructure.database import get_db
from hr_notifications.interfaces.api.schemas import RoutingRuleCreate, RoutingRuleRead

router = APIRouter(prefix="/routing-rules", tags=["routing-rules"])


@router.get("/", response_model=list[RoutingRuleRead])
def list_routing_rules(
    trigger: str | None = None, db: Session = Depends(get_db)
) -> list[RoutingRuleRead]:
    rules = list_routing_rules_uc(db, trigger=trigger)
    return [RoutingRuleRead.model_validate(rule) for rule in rules]


@router.post("/", response_model=RoutingRuleRead, status_code=status.HTTP_201_CREATED)
def create_routing_rule(
    payload: RoutingRuleCreate, db: Session = Depends(get_db)
) -> RoutingRuleRead:
    """Create a routing rule with its ordered routes."""

    routes = [
        Route(id=None, recipient_id=route.recipient_id, conditions=route.conditions)
        for route in payload.routes
    ]
    try:
        rule = create_routing_rule_uc(
            db,
            name=payload.name,
            trigger=payload.trigger,
            routes=routes,
            conditions=payload.conditions,
            is_active=payload.is_active,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return RoutingRuleRead.model_validate(rule)
