from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import elapsed_ms, entry_date, now_utc
from ..core.enums import EntryType, ShiftStatus
from .model import BreakInterval, DailyShift, TimeEntry


def parse_shift_for_day(entries: Iterable[TimeEntry], *, now: Optional[datetime] = None) -> DailyShift:
    """Rebuild a barber's shift from one day of time entries.

    Entries may arrive in any order; they are sorted by instant (stable on
    ties). The first clock-in and the last clock-out bound the shift. A
    break_start while a break is open, or a break_end with none open, is
    ignored rather than rejected. Open shifts and breaks run until ``now``,
    which is read once when not supplied.
    """
    ordered = sorted(entries, key=lambda e: e.timestamp)
    if not ordered:
        return DailyShift.empty()

    now = now or now_utc()

    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    breaks: list[BreakInterval] = []
    open_break: Optional[datetime] = None

    for entry in ordered:
        if entry.entry_type == EntryType.CLOCK_IN:
            if clock_in is None:
                clock_in = entry.timestamp
        elif entry.entry_type == EntryType.CLOCK_OUT:
            clock_out = entry.timestamp
        elif entry.entry_type == EntryType.BREAK_START:
            if open_break is None:
                open_break = entry.timestamp
        elif entry.entry_type == EntryType.BREAK_END:
            if open_break is not None:
                breaks.append(BreakInterval(start=open_break, end=entry.timestamp))
                open_break = None

    if open_break is not None:
        breaks.append(BreakInterval(start=open_break))

    total_worked_ms = 0
    if clock_in is not None:
        total_worked_ms = elapsed_ms(clock_in, clock_out or now)

    break_time_ms = sum(elapsed_ms(b.start, b.end or now) for b in breaks)
    net_worked_ms = max(0, total_worked_ms - break_time_ms)

    return DailyShift(
        date=entry_date(ordered[0].timestamp),
        clock_in=clock_in,
        clock_out=clock_out,
        breaks=tuple(breaks),
        total_worked_ms=total_worked_ms,
        break_time_ms=break_time_ms,
        net_worked_ms=net_worked_ms,
        status=_classify(clock_in, clock_out, open_break is not None),
        entries=tuple(ordered),
    )


def _classify(clock_in: Optional[datetime], clock_out: Optional[datetime], on_break: bool) -> ShiftStatus:
    if clock_in is None:
        return ShiftStatus.INCOMPLETE
    if clock_out is not None:
        return ShiftStatus.COMPLETE
    if on_break:
        return ShiftStatus.ON_BREAK
    return ShiftStatus.IN_PROGRESS
