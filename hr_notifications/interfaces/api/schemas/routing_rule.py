"""Schemas for routing rule endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RouteBase(BaseModel):
    recipient_id: str = Field(..., min_length=1)
    conditions: dict[str, Any] | None = None


class RouteRead(RouteBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    position: int


class RoutingRuleCreate(BaseModel):
    """Payload required to create a routing rule."""

    name: str = Field(..., min_length=1)
    trigger: str = Field(..., min_length=1)
    is_active: bool = True
    conditions: dict[str, Any] | None = None
    routes: list[RouteBase] = Field(default_factory=list)


class RoutingRuleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    trigger: str
    is_active: bool
    conditions: dict[str, Any] | None = None
    created_at: datetime | None = None
    routes: list[RouteRead] = Field(default_factory=list)


__all__ = ["RouteBase", "RouteRead", "RoutingRuleCreate", "RoutingRuleRead"]
