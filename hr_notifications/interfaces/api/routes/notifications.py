"""Endpoints exposing notification routing and lifecycle operations."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from hr_notifications.application.use_cases.notifications import (
    NotificationAccessError,
    NotificationNotFoundError,
    ReferenceNotFoundError,
    create_notification as create_notification_uc,
    list_notifications as list_notifications_uc,
    mark_as_read as mark_as_read_uc,
    route_notification as route_notification_uc,
    update_status as update_status_uc,
)
from hr_notifications.domain.entities import Notification, NotificationData, parse_sender
from hr_notifications.infrastructure.database import get_db
from hr_notifications.infrastructure.notifications import DeliveryDispatcher
from hr_notifications.interfaces.api.dependencies import get_dispatcher
from hr_notifications.interfaces.api.schemas import (
    NotificationCreate,
    NotificationListRead,
    NotificationMarkReadRequest,
    NotificationRead,
    NotificationRouteRequest,
    NotificationStatisticsRead,
    NotificationStatusUpdate,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _to_read_model(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def _raise_for_lifecycle_error(exc: ValueError) -> None:
    if isinstance(exc, NotificationNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if isinstance(exc, NotificationAccessError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/", response_model=NotificationListRead)
def list_notifications(
    category: str = Query("all", description="performance, training, deadlines, escalations, approvals or all"),
    status_filter: str | None = Query(None, alias="status"),
    priority: str | None = None,
    recipient_id: str | None = None,
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
) -> NotificationListRead:
    """Return the newest notifications together with summary statistics."""

    listing = list_notifications_uc(
        db,
        category=category,
        status=status_filter,
        priority=priority,
        recipient_id=recipient_id,
        limit=limit,
    )
    return NotificationListRead(
        notifications=[_to_read_model(item) for item in listing.notifications],
        statistics=NotificationStatisticsRead.model_validate(listing.statistics),
    )


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    dispatcher: DeliveryDispatcher = Depends(get_dispatcher),
) -> NotificationRead:
    """Create a notification for an explicitly chosen recipient."""

    data = NotificationData(
        title=payload.title,
        message=payload.message,
        type=payload.type,
        priority=payload.priority,
        recipient_id=payload.recipient_id,
        employee_id=payload.employee_id,
        sender=parse_sender(payload.sender_id),
        deadline=payload.deadline,
        action_url=payload.action_url,
        metadata=payload.metadata,
    )
    try:
        notification = create_notification_uc(db, data, dispatcher=dispatcher)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(notification)


@router.post(
    "/route", response_model=list[NotificationRead], status_code=status.HTTP_201_CREATED
)
def route_notification(
    payload: NotificationRouteRequest,
    db: Session = Depends(get_db),
    dispatcher: DeliveryDispatcher = Depends(get_dispatcher),
) -> list[NotificationRead]:
    """Fan an HR event out to its routing rules, or to the default recipient."""

    try:
        notifications = route_notification_uc(
            db,
            payload.trigger_type,
            payload.employee_id,
            payload.metadata,
            dispatcher=dispatcher,
        )
    except ReferenceNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        logger.warning("Routing %s for employee %s failed: %s", payload.trigger_type, payload.employee_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [_to_read_model(notification) for notification in notifications]


@router.post("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_as_read(
    notification_id: str,
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
) -> NotificationRead:
    try:
        notification = mark_as_read_uc(db, notification_id, payload.user_id)
    except ValueError as exc:
        _raise_for_lifecycle_error(exc)
    return _to_read_model(notification)


@router.patch("/{notification_id}/status", response_model=NotificationRead)
def update_notification_status(
    notification_id: str,
    payload: NotificationStatusUpdate,
    db: Session = Depends(get_db),
) -> NotificationRead:
    try:
        notification = update_status_uc(
            db, notification_id, payload.status, payload.user_id
        )
    except ValueError as exc:
        _raise_for_lifecycle_error(exc)
    return _to_read_model(notification)
