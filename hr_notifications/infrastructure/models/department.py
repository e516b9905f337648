"""SQLAlchemy model for departments."""

from uuid import uuid4

from sqlalchemy import Column, String

from hr_notifications.infrastructure.database import Base


class DepartmentModel(Base):
    """Database representation of an organizational department."""

    __tablename__ = "departments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(150), nullable=False, unique=True)


__all__ = ["DepartmentModel"]
