"""Domain entities describing employees and their departments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

UNKNOWN_DEPARTMENT = "Unknown Department"


@dataclass
class Department:
    """Organizational unit an employee belongs to."""

    id: str | None
    name: str


@dataclass
class Employee:
    """Directory record of a person the HR workflows act upon."""

    id: str | None
    first_name: str
    last_name: str
    email: str | None = None
    position: str | None = None
    department: str | None = None
    department_id: str | None = None
    department_ref: Department | None = None
    supervisor_id: str | None = None
    user_id: str | None = None
    archived_at: datetime | None = None
    created_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def department_name(self) -> str:
        """Return the related department name, else the denormalized label."""

        if self.department_ref is not None and self.department_ref.name:
            return self.department_ref.name
        if self.department:
            return self.department
        return UNKNOWN_DEPARTMENT

    @property
    def is_archived(self) -> bool:
        return self.archived_at is not None


__all__ = ["Department", "Employee", "UNKNOWN_DEPARTMENT"]
