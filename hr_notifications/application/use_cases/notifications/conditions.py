"""Evaluation of optional routing conditions against an employee."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hr_notifications.domain.entities import Employee


def conditions_match(
    conditions: Mapping[str, Any] | None,
    employee: Employee,
    metadata: Mapping[str, Any] | None = None,
) -> bool:
    """Return ``True`` when every configured condition holds.

    Supported keys: ``department`` (exact department name), ``position``
    (case-insensitive substring of the employee position) and ``metadata``
    (every key must equal the event metadata value). A metadata condition is
    never satisfied by an event that carries no metadata, so such a rule or
    route is skipped rather than applied unconditionally.
    """

    if not conditions:
        return True

    department = conditions.get("department")
    if department and department != employee.department_name:
        return False

    position = conditions.get("position")
    if position:
        if position.lower() not in (employee.position or "").lower():
            return False

    expected_metadata = conditions.get("metadata")
    if expected_metadata:
        actual = metadata or {}
        for key, value in expected_metadata.items():
            if actual.get(key) != value:
                return False

    return True


__all__ = ["conditions_match"]
