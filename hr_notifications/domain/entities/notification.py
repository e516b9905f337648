"""Domain entities representing HR notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Union


class NotificationType(str, Enum):
    """Notification kinds that carry dedicated routing and delivery policies."""

    PERFORMANCE_PLAN = "PERFORMANCE_PLAN"
    APPRAISAL = "APPRAISAL"
    TRAINING = "TRAINING"
    DEADLINE = "DEADLINE"
    ESCALATION = "ESCALATION"
    APPROVAL = "APPROVAL"

    @classmethod
    def parse(cls, value: str | None) -> "NotificationType | None":
        """Return the member matching ``value`` case-insensitively, if any."""

        normalized = normalize_notification_type(value)
        try:
            return cls(normalized)
        except ValueError:
            return None


class NotificationPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def parse(cls, value: Any) -> "NotificationPriority | None":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class NotificationStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    DELIVERED = "delivered"
    ACKNOWLEDGED = "acknowledged"
    DISMISSED = "dismissed"
    ESCALATED = "escalated"


@dataclass(frozen=True)
class SystemSender:
    """Sender used for notifications generated without a human author."""

    def __repr__(self) -> str:
        return "SYSTEM_SENDER"


@dataclass(frozen=True)
class UserSender:
    """Sender backed by an existing user account."""

    user_id: str


Sender = Union[SystemSender, UserSender]

SYSTEM_SENDER = SystemSender()
SYSTEM_SENDER_ALIAS = "system"


def parse_sender(value: str | None) -> Sender | None:
    """Translate an external sender identifier into a :data:`Sender`."""

    if value is None:
        return None
    stripped = value.strip()
    if not stripped:
        return None
    if stripped.lower() == SYSTEM_SENDER_ALIAS:
        return SYSTEM_SENDER
    return UserSender(stripped)


def normalize_notification_type(value: str | None) -> str:
    return (value or "").strip().upper()


@dataclass
class NotificationData:
    """Fields supplied by a workflow to create one notification."""

    title: str
    message: str
    type: str
    priority: NotificationPriority = NotificationPriority.NORMAL
    recipient_id: str | None = None
    employee_id: str | None = None
    sender: Sender | None = SYSTEM_SENDER
    deadline: datetime | None = None
    action_url: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Notification:
    """Persisted notification addressed to one recipient."""

    id: str | None
    title: str
    message: str
    type: str
    priority: NotificationPriority
    status: NotificationStatus
    is_read: bool
    recipient_id: str | None
    employee_id: str | None
    sender_id: str | None
    deadline: datetime | None = None
    action_url: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    acknowledged_at: datetime | None = None


__all__ = [
    "Notification",
    "NotificationData",
    "NotificationPriority",
    "NotificationStatus",
    "NotificationType",
    "Sender",
    "SystemSender",
    "UserSender",
    "SYSTEM_SENDER",
    "normalize_notification_type",
    "parse_sender",
]
