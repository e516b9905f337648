"""Shared fixtures for the HR notifications test-suite."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure the project root (which contains the ``hr_notifications`` package) is importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep the module level engine away from the filesystem during the tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_TIMEZONE", "UTC")

from sqlalchemy.orm import sessionmaker

from hr_notifications.domain.entities import EmailDelivery, Employee, User
from hr_notifications.infrastructure.database import build_engine, initialize_database
from hr_notifications.infrastructure.repositories import (
    EmployeeRepository,
    UserRepository,
)


class RecordingDispatcher:
    """Dispatcher double that keeps every scheduled email in memory."""

    def __init__(self) -> None:
        self.deliveries: list[EmailDelivery] = []

    def dispatch(self, delivery: EmailDelivery) -> None:
        self.deliveries.append(delivery)


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    initialize_database(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture()
def make_user(session):
    """Return a factory that stores a user account."""

    counter = {"value": 0}

    def _make_user(
        first_name: str | None = "Alex",
        last_name: str | None = "Reviewer",
        email: str | None = None,
    ) -> User:
        counter["value"] += 1
        if email is None:
            email = f"user{counter['value']}@example.com"
        return UserRepository(session).create(
            User(id=None, email=email, first_name=first_name, last_name=last_name)
        )

    return _make_user


@pytest.fixture()
def make_employee(session):
    """Return a factory that stores an employee directory entry."""

    def _make_employee(
        first_name: str = "Jane",
        last_name: str = "Doe",
        *,
        email: str | None = "jane.doe@example.com",
        position: str | None = "Analyst",
        department: str | None = "Engineering",
        department_id: str | None = None,
        supervisor_id: str | None = None,
        user_id: str | None = None,
        archived_at=None,
        created_at=None,
    ) -> Employee:
        return EmployeeRepository(session).create(
            Employee(
                id=None,
                first_name=first_name,
                last_name=last_name,
                email=email,
                position=position,
                department=department,
                department_id=department_id,
                supervisor_id=supervisor_id,
                user_id=user_id,
                archived_at=archived_at,
                created_at=created_at,
            )
        )

    return _make_employee
