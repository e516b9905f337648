"""Persistence layer for user data."""

from __future__ import annotations

from uuid import uuid4

from sqlalchemy.orm import Session

from hr_notifications.domain.entities import User
from hr_notifications.infrastructure.models import UserModel
from hr_notifications.utils import ensure_app_naive_datetime, ensure_app_timezone


class UserRepository:
    """Provide lookups and creation for :class:`User` accounts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def exists(self, user_id: str) -> bool:
        return (
            self.session.query(UserModel.id).filter(UserModel.id == user_id).first()
            is not None
        )

    def create(self, user: User) -> User:
        model = UserModel(id=user.id or str(uuid4()))
        model.email = user.email
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.is_active = user.is_active
        if user.created_at is not None:
            model.created_at = ensure_app_naive_datetime(user.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
