"""Example: drive the time clock through the service layer with an in-memory store.

Shows a barber's day (clock in, break, clock out) and the owner's daily summary.
"""

from datetime import datetime, timedelta, timezone

from src.barber_timeclock.barber_timeclock.common.datetime_utils import format_duration, format_time
from src.barber_timeclock.barber_timeclock.core.enums import EntryType
from src.barber_timeclock.barber_timeclock.main import create_container
from src.barber_timeclock.barber_timeclock.timeclock.model import TimeEntry


class MemoryEntries:
    def __init__(self):
        self._rows = []

    def list_entries(self, *, start, end, barber_id=None):
        return [
            e for e in self._rows if start <= e.timestamp < end and (barber_id is None or e.barber_id == barber_id)
        ]

    def add_entry(self, *, barber_id, entry_type, timestamp, note=None):
        entry = TimeEntry(str(len(self._rows) + 1), barber_id, entry_type, timestamp, note)
        self._rows.append(entry)
        return entry


class StaticBarbers:
    def get_display_names(self):
        return {"b-1": "Marco"}


def main():
    container = create_container(MemoryEntries(), StaticBarbers())
    clock = container.time_clock_service

    day = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)
    for action, offset in [
        (EntryType.CLOCK_IN, timedelta()),
        (EntryType.BREAK_START, timedelta(hours=3)),
        (EntryType.BREAK_END, timedelta(hours=3, minutes=30)),
        (EntryType.CLOCK_OUT, timedelta(hours=8)),
    ]:
        clock.record_action("b-1", action, now=day + offset)

    shift = clock.today_shift("b-1", now=day + timedelta(hours=9))
    print(shift.status.value, format_time(shift.clock_in, container.display_tz), format_duration(shift.net_worked_ms))

    report = container.report_service.build_report(start=day.date(), end=day.date(), now=day + timedelta(hours=9))
    for row in report.rows:
        print(row)


if __name__ == "__main__":
    main()
