"""SQLAlchemy model for employees."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from hr_notifications.infrastructure.database import Base
from hr_notifications.utils import now_in_app_naive_datetime


class EmployeeModel(Base):
    """Database representation of an employee directory entry."""

    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)
    position = Column(String(150), nullable=True)
    department = Column(String(150), nullable=True)
    department_id = Column(
        String(36), ForeignKey("departments.id"), nullable=True, index=True
    )
    supervisor_id = Column(
        String(36), ForeignKey("employees.id"), nullable=True, index=True
    )
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)
    archived_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    department_ref = relationship("DepartmentModel", lazy="joined")


__all__ = ["EmployeeModel"]
