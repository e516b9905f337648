"""Domain entity representing an application user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Account that can receive or send notifications."""

    id: str | None
    email: str | None
    first_name: str | None
    last_name: str | None
    is_active: bool = True
    created_at: datetime | None = None


__all__ = ["User"]
