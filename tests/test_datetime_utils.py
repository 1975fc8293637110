from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from src.barber_timeclock.barber_timeclock.common.datetime_utils import (
    day_bounds,
    elapsed_ms,
    format_duration,
    format_time,
    ms_to_hours,
    parse_iso_date,
    parse_iso_timestamp,
    resolve_timezone,
)
from src.barber_timeclock.barber_timeclock.core.enums import EntryType
from src.barber_timeclock.barber_timeclock.core.exceptions import ValidationError
from src.barber_timeclock.barber_timeclock.timeclock.model import TimeEntry


def test_parse_iso_timestamp_variants():
    assert parse_iso_timestamp("2026-03-02T09:00:00Z") == datetime(2026, 3, 2, 9, tzinfo=timezone.utc)
    assert parse_iso_timestamp("2026-03-02T09:00:00.123+00:00").microsecond == 123000
    assert parse_iso_timestamp("2026-03-02T09:00:00").tzinfo == timezone.utc

    offset = parse_iso_timestamp("2026-03-02T04:00:00-05:00")
    assert offset == datetime(2026, 3, 2, 9, tzinfo=timezone.utc)
    assert offset.date() == date(2026, 3, 2)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2026-03-02T09:00:00.12345+00:00", datetime(2026, 3, 2, 9, 0, 0, 123450, tzinfo=timezone.utc)),
        ("2026-03-02T09:00:00.1+00:00", datetime(2026, 3, 2, 9, 0, 0, 100000, tzinfo=timezone.utc)),
        ("2026-03-02T09:00:00.123456789Z", datetime(2026, 3, 2, 9, 0, 0, 123456, tzinfo=timezone.utc)),
        ("2026-03-02 09:00:00+00", datetime(2026, 3, 2, 9, tzinfo=timezone.utc)),
        ("2026-03-02 04:00:00.5-05", datetime(2026, 3, 2, 9, 0, 0, 500000, tzinfo=timezone.utc)),
        ("2026-03-02T14:30:00+0530", datetime(2026, 3, 2, 9, tzinfo=timezone.utc)),
    ],
)
def test_parse_iso_timestamp_postgres_formats(raw, expected):
    assert parse_iso_timestamp(raw) == expected


def test_time_entry_from_row_with_postgres_timestamp():
    entry = TimeEntry.from_dict(
        {"id": "1", "barber_id": "b1", "entry_type": "clock_in", "timestamp": "2026-03-02 09:00:00.12345+00"}
    )

    assert entry.timestamp == datetime(2026, 3, 2, 9, 0, 0, 123450, tzinfo=timezone.utc)


def test_parse_iso_timestamp_rejects_garbage():
    with pytest.raises(ValidationError):
        parse_iso_timestamp("yesterday-ish")


def test_durations():
    start = datetime(2026, 3, 2, 9, tzinfo=timezone.utc)

    assert elapsed_ms(start, start + timedelta(hours=7, minutes=30, seconds=59)) == 27_059_000
    assert ms_to_hours(5_400_000) == 1.5
    assert format_duration(27_059_000) == "7h 30m"
    assert format_duration(0) == "0h 0m"


def test_format_time_twelve_hour():
    ts = datetime(2026, 3, 2, 14, 5, tzinfo=timezone.utc)

    assert format_time(ts) == "02:05 PM"
    assert format_time(ts, timezone(timedelta(hours=-5))) == "09:05 AM"


def test_day_bounds_and_timezones():
    tz = resolve_timezone("UTC")
    start, end = day_bounds(date(2026, 3, 2), tz)

    assert start == datetime(2026, 3, 2, tzinfo=timezone.utc)
    assert end - start == timedelta(days=1)

    with pytest.raises(ValidationError):
        resolve_timezone("Mars/Olympus_Mons")


def test_parse_iso_date():
    assert parse_iso_date("2026-03-02") == date(2026, 3, 2)
    with pytest.raises(ValidationError):
        parse_iso_date("03/02/2026")


def test_time_entry_from_row():
    entry = TimeEntry.from_dict(
        {"id": 42, "barber_id": "b1", "entry_type": "break_start", "timestamp": "2026-03-02T12:00:00Z", "note": ""}
    )

    assert entry.entry_id == "42"
    assert entry.entry_type == EntryType.BREAK_START
    assert entry.timestamp == datetime(2026, 3, 2, 12, tzinfo=timezone.utc)
    assert entry.note is None

    with pytest.raises(ValidationError):
        TimeEntry.from_dict({"id": 1, "barber_id": "b1", "entry_type": "lunch", "timestamp": "2026-03-02T12:00:00Z"})
    with pytest.raises(ValidationError):
        TimeEntry.from_dict({"barber_id": "b1", "entry_type": "clock_in", "timestamp": "2026-03-02T12:00:00Z"})
    with pytest.raises(ValidationError, match="must be an object"):
        TimeEntry.from_dict(["1", "b1", "clock_in", "2026-03-02T12:00:00Z"])
