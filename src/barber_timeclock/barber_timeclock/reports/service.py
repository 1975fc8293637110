from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo
from typing import Optional

from ..barbers.repository import BarberDirectory
from ..common.datetime_utils import day_bounds
from ..core.constants import UNKNOWN_BARBER_NAME
from ..core.exceptions import ValidationError
from ..timeclock.model import DailySummary
from ..timeclock.repository import TimeEntryRepository
from ..timeclock.summaries import calculate_daily_summaries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportData:
    summaries: list[DailySummary]
    rows: list[dict]


class TimeTrackingReportService:
    def __init__(
        self,
        entries: TimeEntryRepository,
        barbers: BarberDirectory,
        *,
        day_tz: tzinfo = timezone.utc,
        unknown_name: str = UNKNOWN_BARBER_NAME,
    ):
        self._entries = entries
        self._barbers = barbers
        self._day_tz = day_tz
        self._unknown_name = unknown_name

    def build_report(
        self,
        *,
        start: date,
        end: date,
        barber_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> ReportData:
        """Daily summaries for every barber day between ``start`` and ``end`` (inclusive)."""
        if start > end:
            raise ValidationError("Start date must not be after end date")

        range_start, _ = day_bounds(start, self._day_tz)
        _, range_end = day_bounds(end, self._day_tz)
        entries = self._entries.list_entries(start=range_start, end=range_end, barber_id=barber_id)

        summaries = calculate_daily_summaries(
            entries,
            self._barbers.get_display_names(),
            now=now,
            unknown_name=self._unknown_name,
        )
        logger.info("Built time tracking report %s..%s: %d entries, %d days", start, end, len(entries), len(summaries))
        return ReportData(summaries=summaries, rows=[self._to_row(s) for s in summaries])

    def _to_row(self, s: DailySummary) -> dict:
        shift = s.shift
        return {
            "date": s.date.isoformat(),
            "barber_id": s.barber_id,
            "barber_name": s.barber_name,
            "clock_in": shift.clock_in.isoformat() if shift.clock_in else "",
            "clock_out": shift.clock_out.isoformat() if shift.clock_out else "",
            "status": shift.status.value,
            "total_hours": round(s.total_hours, 2),
            "break_hours": round(s.break_hours, 2),
            "net_hours": round(s.net_hours, 2),
            "entry_count": s.entry_count,
            "issue": s.issue_description or "",
        }
