"""Validation helpers for routing rule use cases."""

from collections.abc import Mapping
from typing import Any

_CONDITION_KEYS = {"department", "position", "metadata"}


def ensure_valid_trigger(trigger: str | None) -> None:
    if not trigger or not trigger.strip():
        raise ValueError("Routing rule trigger is required")


def ensure_valid_conditions(conditions: Any) -> None:
    """Reject condition payloads the router would not understand."""

    if conditions is None:
        return
    if not isinstance(conditions, Mapping):
        raise ValueError("Routing conditions must be an object")
    unknown = set(conditions) - _CONDITION_KEYS
    if unknown:
        raise ValueError(
            "Unsupported routing condition(s): " + ", ".join(sorted(unknown))
        )
    for key in ("department", "position"):
        value = conditions.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Routing condition '{key}' must be a string")
    metadata = conditions.get("metadata")
    if metadata is not None and not isinstance(metadata, Mapping):
        raise ValueError("Routing condition 'metadata' must be an object")


__all__ = ["ensure_valid_conditions", "ensure_valid_trigger"]
