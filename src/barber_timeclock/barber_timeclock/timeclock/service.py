from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Optional, Union

from ..common.datetime_utils import day_bounds, now_utc
from ..common.validators import require_non_empty
from ..core.enums import ClockState, EntryType
from ..core.exceptions import ValidationError
from .model import DailyShift, TimeEntry
from .repository import TimeEntryRepository
from .shifts import parse_shift_for_day
from .validation import allowed_actions, current_clock_state, validate_clock_action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClockStatus:
    """What the time-clock card needs to render its buttons."""

    state: ClockState
    allowed_actions: list[EntryType]
    shift: DailyShift


class TimeClockService:
    """Clock actions for one barber's current day.

    Every action is checked against today's entries before the single insert
    is made. Callers must keep at most one action per barber in flight.
    """

    def __init__(self, entries: TimeEntryRepository, *, day_tz: tzinfo = timezone.utc):
        self._entries = entries
        self._day_tz = day_tz

    def todays_entries(self, barber_id: str, *, now: Optional[datetime] = None) -> list[TimeEntry]:
        barber_id = require_non_empty(barber_id, "barber_id")
        now = now or now_utc()
        start, end = day_bounds(now.astimezone(self._day_tz).date(), self._day_tz)
        rows = self._entries.list_entries(start=start, end=end, barber_id=barber_id)
        return sorted(rows, key=lambda e: e.timestamp)

    def record_action(
        self,
        barber_id: str,
        action: Union[EntryType, str],
        *,
        now: Optional[datetime] = None,
        note: Optional[str] = None,
    ) -> TimeEntry:
        now = now or now_utc()
        today = self.todays_entries(barber_id, now=now)

        result = validate_clock_action(today, action)
        if not result:
            logger.info("Rejected %s for barber %s: %s", action, barber_id, result.reason)
            raise ValidationError(result.reason)

        entry = self._entries.add_entry(
            barber_id=barber_id.strip(),
            entry_type=EntryType(action),
            timestamp=now,
            note=note,
        )
        logger.info("Recorded %s for barber %s at %s", entry.entry_type.value, entry.barber_id, now.isoformat())
        return entry

    def today_shift(self, barber_id: str, *, now: Optional[datetime] = None) -> DailyShift:
        now = now or now_utc()
        return parse_shift_for_day(self.todays_entries(barber_id, now=now), now=now)

    def clock_status(self, barber_id: str, *, now: Optional[datetime] = None) -> ClockStatus:
        now = now or now_utc()
        today = self.todays_entries(barber_id, now=now)
        return ClockStatus(
            state=current_clock_state(today),
            allowed_actions=allowed_actions(today),
            shift=parse_shift_for_day(today, now=now),
        )
