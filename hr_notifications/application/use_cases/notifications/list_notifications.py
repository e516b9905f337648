"""Use case for listing notifications together with summary statistics."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from hr_notifications.domain.entities import (
    Notification,
    NotificationStatus,
    NotificationType,
)
from hr_notifications.infrastructure.repositories import NotificationRepository

CATEGORY_TYPES: dict[str, tuple[NotificationType, ...]] = {
    "performance": (NotificationType.PERFORMANCE_PLAN, NotificationType.APPRAISAL),
    "training": (NotificationType.TRAINING,),
    "deadlines": (NotificationType.DEADLINE,),
    "escalations": (NotificationType.ESCALATION,),
    "approvals": (NotificationType.APPROVAL,),
}

_SENT_STATUSES = (
    NotificationStatus.SENT.value,
    NotificationStatus.DELIVERED.value,
    NotificationStatus.ACKNOWLEDGED.value,
)


@dataclass(frozen=True)
class NotificationStatistics:
    total: int
    pending: int
    escalated: int
    success_rate: int


@dataclass(frozen=True)
class NotificationListing:
    notifications: list[Notification]
    statistics: NotificationStatistics


def list_notifications(
    session: Session,
    *,
    category: str = "all",
    status: str | None = None,
    priority: str | None = None,
    recipient_id: str | None = None,
    limit: int = 50,
) -> NotificationListing:
    """Return the newest notifications matching the filters and their counts.

    ``total`` honours every filter. The per-status counters honour the
    category, priority and recipient filters but replace the status filter
    with their own status. ``success_rate`` is the percentage of acknowledged
    notifications among those sent, delivered or acknowledged.
    Unknown categories behave like ``"all"``.
    """

    category_types = CATEGORY_TYPES.get((category or "all").lower())
    types = [member.value for member in category_types] if category_types else None
    repository = NotificationRepository(session)

    notifications = list(
        repository.list(
            types=types,
            status=status,
            priority=priority,
            recipient_id=recipient_id,
            limit=limit,
        )
    )

    def _count(statuses: Sequence[str] | None) -> int:
        return repository.count(
            types=types,
            statuses=statuses,
            priority=priority,
            recipient_id=recipient_id,
        )

    sent = _count(_SENT_STATUSES)
    acknowledged = _count([NotificationStatus.ACKNOWLEDGED.value])
    statistics = NotificationStatistics(
        total=_count([status] if status else None),
        pending=_count([NotificationStatus.PENDING.value]),
        escalated=_count([NotificationStatus.ESCALATED.value]),
        success_rate=round(acknowledged / sent * 100) if sent else 0,
    )
    return NotificationListing(notifications=notifications, statistics=statistics)


__all__ = [
    "CATEGORY_TYPES",
    "NotificationListing",
    "NotificationStatistics",
    "list_notifications",
]
