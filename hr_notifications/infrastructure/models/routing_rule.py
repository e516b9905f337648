"""SQLAlchemy models for notification routing rules and their routes."""

from uuid import uuid4

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from hr_notifications.infrastructure.database import Base
from hr_notifications.utils import now_in_app_naive_datetime


class RoutingRuleModel(Base):
    """Database representation of a trigger-to-route binding."""

    __tablename__ = "notification_routing_rules"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(150), nullable=False)
    trigger = Column(String(50), nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    conditions = Column(JSON, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    routes = relationship(
        "RouteModel",
        back_populates="rule",
        cascade="all, delete-orphan",
        order_by="RouteModel.position",
        lazy="selectin",
    )


class RouteModel(Base):
    """Database representation of one recipient inside a routing rule."""

    __tablename__ = "notification_routes"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    rule_id = Column(
        String(36),
        ForeignKey("notification_routing_rules.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipient = Column(String(36), ForeignKey("users.id"), nullable=False)
    conditions = Column(JSON, nullable=True)
    position = Column(Integer, nullable=False, default=0)

    rule = relationship("RoutingRuleModel", back_populates="routes")


__all__ = ["RouteModel", "RoutingRuleModel"]
