"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from backoffice.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "UTC"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)
_ELAPSED_UNITS: Final[tuple[tuple[str, int], ...]] = (
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured application timezone.

    The timezone is resolved using the ``APP_TIMEZONE`` environment variable (via
    the ``Settings`` model). If the provided value cannot be resolved, UTC is
    used as a fallback.
    """

    return resolve_timezone(get_settings().app_timezone)


def resolve_timezone(tz_name: str | None) -> tzinfo:
    """Resolve an IANA name or ``UTC+hh:mm`` offset, defaulting to UTC."""

    return _resolve_timezone((tz_name or "").strip() or _DEFAULT_TIMEZONE)


def now_in_app_timezone() -> datetime:
    """Return the current time localized to the configured timezone."""

    return datetime.now(tz=get_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed in the configured timezone."""

    if value is None:
        return None

    tz = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def describe_elapsed(value: datetime, now: datetime | None = None) -> str:
    """Return a short relative description such as ``"5 minutes ago"``.

    Used by the notification list view next to each entry.
    """

    reference = ensure_app_timezone(now) if now else now_in_app_timezone()
    seconds = int((reference - ensure_app_timezone(value)).total_seconds())
    if seconds < 60:
        return "less than a minute ago"

    for unit, size in _ELAPSED_UNITS:
        amount = seconds // size
        if amount >= 1:
            suffix = "" if amount == 1 else "s"
            return f"{amount} {unit}{suffix} ago"
    return "less than a minute ago"  # pragma: no cover - unreachable


def _resolve_timezone(tz_name: str) -> tzinfo:
    """Resolve ``tz_name`` into a ``timezone`` instance."""

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    return timezone.utc
