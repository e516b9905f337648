"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, String, Text

from hr_notifications.infrastructure.database import Base
from hr_notifications.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for HR notifications."""

    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(50), nullable=False, index=True)
    priority = Column(String(20), nullable=False, default="normal", index=True)
    status = Column(String(20), nullable=False, default="pending", index=True)
    is_read = Column(Boolean, nullable=False, default=False)
    recipient_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)
    employee_id = Column(
        String(36), ForeignKey("employees.id"), nullable=True, index=True
    )
    sender_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    deadline = Column(DateTime, nullable=True)
    action_url = Column(String(500), nullable=True)
    metadata_json = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )
    acknowledged_at = Column(DateTime, nullable=True)


__all__ = ["NotificationModel"]
