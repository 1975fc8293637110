from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import MS_PER_HOUR
from ..core.exceptions import ValidationError

_ONE_MS = timedelta(milliseconds=1)

# Postgres renders timestamptz with trimmed fractions and "+00" style offsets.
_ISO_PARTS = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(?::\d{2})?)"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<tz>Z|[+-]\d{2}(?::?\d{2})?)?$"
)


def _normalize_iso(text: str) -> str:
    m = _ISO_PARTS.match(text)
    if not m:
        return text

    out = m.group("base")
    frac = m.group("frac")
    if frac:
        out += "." + frac[:6].ljust(6, "0")

    tz = m.group("tz")
    if tz == "Z":
        out += "+00:00"
    elif tz:
        digits = tz[1:].replace(":", "")
        out += f"{tz[0]}{digits[:2]}:{digits[2:4] or '00'}"
    return out


def parse_iso_timestamp(value: Union[str, datetime]) -> datetime:
    """Parse an ISO-8601 timestamp into an aware datetime.

    Accepts ``Z``, ``+HH``, ``+HHMM`` and ``+HH:MM`` offsets and 1 to 9
    fractional digits (truncated to microseconds). Naive values are taken as
    UTC, which is how entries are stamped when they are written.
    """
    if isinstance(value, datetime):
        ts = value
    else:
        text = _normalize_iso(str(value).strip())
        try:
            ts = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValidationError(f"Invalid timestamp: {value!r}") from exc

    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def entry_date(ts: datetime) -> date:
    """Calendar date of a timestamp in its own offset (no conversion)."""
    return ts.date()


def now_utc() -> datetime:
    """Current instant.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now(timezone.utc)


def elapsed_ms(start: datetime, end: datetime) -> int:
    return (end - start) // _ONE_MS


def ms_to_hours(ms: int) -> float:
    return ms / MS_PER_HOUR


def format_duration(ms: int) -> str:
    """Render a duration as ``"7h 30m"`` (seconds are dropped)."""
    total_minutes = ms // (1000 * 60)
    hours = total_minutes // 60
    minutes = total_minutes % 60
    return f"{hours}h {minutes}m"


def format_time(ts: datetime, tz: Optional[tzinfo] = None) -> str:
    """12-hour clock time, e.g. ``"09:05 AM"``."""
    if tz is not None:
        ts = ts.astimezone(tz)
    return ts.strftime("%I:%M %p")


def day_bounds(day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """Half-open ``[start, end)`` instants covering one local calendar day."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start, end


def resolve_timezone(name: str) -> tzinfo:
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError(f"Unknown timezone: {name!r}") from exc


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {value!r}") from exc
