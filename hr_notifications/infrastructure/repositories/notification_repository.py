"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any
from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from hr_notifications.domain.entities import (
    Notification,
    NotificationPriority,
    NotificationStatus,
)
from hr_notifications.infrastructure.models import NotificationModel
from hr_notifications.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: str) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        types: Iterable[str] | None = None,
        status: str | None = None,
        priority: str | None = None,
        recipient_id: str | None = None,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self._filtered_query(
            types=types, status=status, priority=priority, recipient_id=recipient_id
        )
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count(
        self,
        *,
        types: Iterable[str] | None = None,
        statuses: Iterable[str] | None = None,
        priority: str | None = None,
        recipient_id: str | None = None,
    ) -> int:
        query = self._filtered_query(
            types=types, priority=priority, recipient_id=recipient_id
        )
        if statuses is not None:
            query = query.filter(NotificationModel.status.in_(list(statuses)))
        return query.with_entities(func.count(NotificationModel.id)).scalar() or 0

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(id=notification.id or str(uuid4()))
        now = ensure_app_naive_datetime(notification.created_at or now_in_app_timezone())
        model.created_at = now
        model.updated_at = now
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, notification_id: str, patch: dict[str, Any]) -> Notification:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            msg = f"Notification with id {notification_id} not found"
            raise ValueError(msg)
        for field_name, value in patch.items():
            if field_name == "metadata":
                model.metadata_json = dict(value or {})
            elif field_name in ("deadline", "acknowledged_at"):
                setattr(model, field_name, ensure_app_naive_datetime(value))
            elif field_name in ("priority", "status"):
                setattr(model, field_name, getattr(value, "value", value))
            else:
                setattr(model, field_name, value)
        model.updated_at = ensure_app_naive_datetime(now_in_app_timezone())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _filtered_query(
        self,
        *,
        types: Iterable[str] | None = None,
        status: str | None = None,
        priority: str | None = None,
        recipient_id: str | None = None,
    ) -> Query:
        query = self.session.query(NotificationModel)
        if types is not None:
            query = query.filter(NotificationModel.type.in_(list(types)))
        if status:
            query = query.filter(NotificationModel.status == status)
        if priority:
            query = query.filter(NotificationModel.priority == priority)
        if recipient_id:
            query = query.filter(NotificationModel.recipient_id == recipient_id)
        return query

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.title = notification.title
        model.message = notification.message
        model.type = notification.type
        model.priority = NotificationPriority(notification.priority).value
        model.status = NotificationStatus(notification.status).value
        model.is_read = notification.is_read
        model.recipient_id = notification.recipient_id
        model.employee_id = notification.employee_id
        model.sender_id = notification.sender_id
        model.deadline = ensure_app_naive_datetime(notification.deadline)
        model.action_url = notification.action_url
        model.metadata_json = dict(notification.metadata or {})
        model.acknowledged_at = ensure_app_naive_datetime(notification.acknowledged_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            title=model.title,
            message=model.message,
            type=model.type,
            priority=NotificationPriority(model.priority),
            status=NotificationStatus(model.status),
            is_read=model.is_read,
            recipient_id=model.recipient_id,
            employee_id=model.employee_id,
            sender_id=model.sender_id,
            deadline=ensure_app_timezone(model.deadline),
            action_url=model.action_url,
            metadata=dict(model.metadata_json or {}),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            acknowledged_at=ensure_app_timezone(model.acknowledged_at),
        )


__all__ = ["NotificationRepository"]
