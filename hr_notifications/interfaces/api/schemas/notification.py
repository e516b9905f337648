"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hr_notifications.domain.entities import NotificationPriority, NotificationStatus


class NotificationCreate(BaseModel):
    """Payload used by workflows that already know the recipient."""

    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    priority: NotificationPriority = NotificationPriority.NORMAL
    recipient_id: str | None = None
    employee_id: str | None = None
    sender_id: str | None = Field(
        default="system",
        description="User id of the author, or 'system' for generated notifications",
    )
    deadline: datetime | None = None
    action_url: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class NotificationRouteRequest(BaseModel):
    trigger_type: str = Field(..., min_length=1)
    employee_id: str = Field(..., min_length=1)
    metadata: dict[str, Any] | None = None


class NotificationMarkReadRequest(BaseModel):
    user_id: str = Field(..., min_length=1)


class NotificationStatusUpdate(BaseModel):
    status: str = Field(..., min_length=1)
    user_id: str | None = None


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    message: str
    type: str
    priority: NotificationPriority
    status: NotificationStatus
    is_read: bool
    recipient_id: str | None = None
    employee_id: str | None = None
    sender_id: str | None = None
    deadline: datetime | None = None
    action_url: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    acknowledged_at: datetime | None = None


class NotificationStatisticsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    pending: int
    escalated: int
    success_rate: int


class NotificationListRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    notifications: list[NotificationRead]
    statistics: NotificationStatisticsRead


__all__ = [
    "NotificationCreate",
    "NotificationListRead",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotificationRouteRequest",
    "NotificationStatisticsRead",
    "NotificationStatusUpdate",
]
