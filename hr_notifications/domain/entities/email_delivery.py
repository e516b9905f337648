"""Value objects describing a pending notification email."""

from dataclasses import dataclass
from datetime import datetime

from .notification import NotificationPriority


@dataclass(frozen=True)
class EmployeeSnapshot:
    """Employee details copied into an email job at commit time."""

    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class EmailDelivery:
    """Everything the dispatcher needs to email one notification recipient."""

    notification_id: str | None
    notification_type: str
    to_email: str
    title: str
    message: str
    priority: NotificationPriority = NotificationPriority.NORMAL
    action_url: str | None = None
    employee: EmployeeSnapshot | None = None
    deadline: datetime | None = None


@dataclass(frozen=True)
class EmailContent:
    subject: str
    body: str
    action_button_text: str


__all__ = ["EmailContent", "EmailDelivery", "EmployeeSnapshot"]
