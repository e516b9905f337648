"""Persistence layer for the employee directory."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy import or_
from sqlalchemy.orm import Session

from hr_notifications.domain.entities import Department, Employee
from hr_notifications.infrastructure.models import DepartmentModel, EmployeeModel
from hr_notifications.utils import ensure_app_naive_datetime, ensure_app_timezone


class EmployeeRepository:
    """Read and register employees together with their departments."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, employee_id: str) -> Employee | None:
        model = self.session.get(EmployeeModel, employee_id)
        return self._to_entity(model) if model else None

    def exists(self, employee_id: str) -> bool:
        return (
            self.session.query(EmployeeModel.id)
            .filter(EmployeeModel.id == employee_id)
            .first()
            is not None
        )

    def find_first_hr_contact(
        self,
        *,
        position_keywords: Sequence[str],
        department_keywords: Sequence[str],
    ) -> Employee | None:
        """Return the oldest active employee whose position or department matches."""

        clauses = [
            EmployeeModel.position.ilike(f"%{keyword}%") for keyword in position_keywords
        ]
        clauses.extend(
            EmployeeModel.department.ilike(f"%{keyword}%")
            for keyword in department_keywords
        )
        if not clauses:
            return None

        model = (
            self.session.query(EmployeeModel)
            .filter(EmployeeModel.archived_at.is_(None))
            .filter(or_(*clauses))
            .order_by(EmployeeModel.created_at.asc(), EmployeeModel.id.asc())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, employee: Employee) -> Employee:
        model = EmployeeModel(id=employee.id or str(uuid4()))
        model.first_name = employee.first_name
        model.last_name = employee.last_name
        model.email = employee.email
        model.position = employee.position
        model.department = employee.department
        model.department_id = employee.department_id
        model.supervisor_id = employee.supervisor_id
        model.user_id = employee.user_id
        model.archived_at = ensure_app_naive_datetime(employee.archived_at)
        if employee.created_at is not None:
            model.created_at = ensure_app_naive_datetime(employee.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def create_department(self, name: str) -> Department:
        model = DepartmentModel(id=str(uuid4()), name=name)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return Department(id=model.id, name=model.name)

    @staticmethod
    def _to_entity(model: EmployeeModel) -> Employee:
        department_ref = None
        if model.department_ref is not None:
            department_ref = Department(
                id=model.department_ref.id, name=model.department_ref.name
            )
        return Employee(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            position=model.position,
            department=model.department,
            department_id=model.department_id,
            department_ref=department_ref,
            supervisor_id=model.supervisor_id,
            user_id=model.user_id,
            archived_at=ensure_app_timezone(model.archived_at),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["EmployeeRepository"]
