"""Clock and timezone helpers shared by persistence and deadline computation.

Notifications, rules and directory rows are stored as naive datetimes in the
application timezone and re-localized when they are read back.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from hr_notifications.config import get_settings

_FIXED_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def parse_timezone(name: str | None) -> tzinfo:
    """Return the timezone called ``name``.

    IANA names are looked up first; ``UTC+05:30`` or ``GMT-3`` style values
    become fixed offsets. Empty or unknown values resolve to UTC.
    """

    name = (name or "").strip()
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    match = _FIXED_OFFSET.match(name)
    if match is None:
        return timezone.utc
    offset = timedelta(
        hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
    )
    return timezone(-offset if match.group("sign") == "-" else offset)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Timezone configured through ``APP_TIMEZONE``."""

    return parse_timezone(get_settings().app_timezone)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Column default for creation timestamps."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach (naive input) or convert to (aware input) the app timezone."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` as a naive local time ready for a ``DateTime`` column."""

    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized is not None else None


def deadline_after(offset: timedelta, *, start: datetime | None = None) -> datetime:
    """Return the deadline ``offset`` of elapsed time after ``start`` (default: now).

    The offset is added in UTC so a DST change inside the window does not
    stretch or shrink it; the result is expressed in the app timezone.
    """

    origin = ensure_app_timezone(start) if start is not None else now_in_app_timezone()
    return (origin.astimezone(timezone.utc) + offset).astimezone(get_app_timezone())


__all__ = [
    "deadline_after",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "parse_timezone",
]
