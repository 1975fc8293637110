from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import entry_date, ms_to_hours, now_utc
from ..core.constants import UNKNOWN_BARBER_NAME
from ..core.enums import ShiftIssue, ShiftStatus
from .model import DailyShift, DailySummary, TimeEntry
from .shifts import parse_shift_for_day


def group_entries_by_barber_and_date(entries: Iterable[TimeEntry]) -> dict[str, dict[date, list[TimeEntry]]]:
    """Bucket entries as barber_id -> date -> entries, keeping input order.

    The date is the date portion of each timestamp as recorded, so a shift
    crossing midnight lands in two buckets.
    """
    grouped: dict[str, dict[date, list[TimeEntry]]] = {}
    for entry in entries:
        by_date = grouped.setdefault(entry.barber_id, {})
        by_date.setdefault(entry_date(entry.timestamp), []).append(entry)
    return grouped


def detect_issue(shift: DailyShift) -> Optional[ShiftIssue]:
    if shift.status == ShiftStatus.INCOMPLETE:
        return ShiftIssue.MISSING_PUNCH
    if shift.has_open_break:
        return ShiftIssue.BREAK_NOT_ENDED
    if shift.status == ShiftStatus.IN_PROGRESS:
        return ShiftIssue.SHIFT_IN_PROGRESS
    if shift.status == ShiftStatus.ON_BREAK:
        return ShiftIssue.CURRENTLY_ON_BREAK
    return None


def calculate_daily_summaries(
    entries: Iterable[TimeEntry],
    barber_names: Mapping[str, str],
    *,
    now: Optional[datetime] = None,
    unknown_name: str = UNKNOWN_BARBER_NAME,
) -> list[DailySummary]:
    """Summarize every (barber, day) bucket, newest day first.

    Ties on the same day are ordered by display name.
    """
    now = now or now_utc()
    summaries: list[DailySummary] = []

    for barber_id, by_date in group_entries_by_barber_and_date(entries).items():
        for day, day_entries in by_date.items():
            shift = parse_shift_for_day(day_entries, now=now)
            summaries.append(
                DailySummary(
                    barber_id=barber_id,
                    barber_name=barber_names.get(barber_id) or unknown_name,
                    date=day,
                    shift=shift,
                    total_hours=ms_to_hours(shift.total_worked_ms),
                    break_hours=ms_to_hours(shift.break_time_ms),
                    net_hours=ms_to_hours(shift.net_worked_ms),
                    entry_count=len(day_entries),
                    issue=detect_issue(shift),
                )
            )

    summaries.sort(key=lambda s: s.barber_name.casefold())
    summaries.sort(key=lambda s: s.date, reverse=True)
    return summaries
