from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Any

from .barbers.repository import BarberDirectory
from .common.datetime_utils import resolve_timezone
from .core.constants import UNKNOWN_BARBER_NAME
from .reports.service import TimeTrackingReportService
from .timeclock.repository import TimeEntryRepository
from .timeclock.service import TimeClockService


@dataclass(frozen=True)
class Container:
    entries_repo: TimeEntryRepository
    barbers_repo: BarberDirectory

    day_tz: tzinfo
    display_tz: tzinfo

    time_clock_service: TimeClockService
    report_service: TimeTrackingReportService


def build_container(entries_repo: TimeEntryRepository, barbers_repo: BarberDirectory, *, settings: Any) -> Container:
    day_tz = resolve_timezone(str(getattr(settings, "DAY_TIMEZONE", "UTC")))
    display_tz = resolve_timezone(str(getattr(settings, "DISPLAY_TIMEZONE", "UTC")))
    unknown_name = str(getattr(settings, "UNKNOWN_BARBER_NAME", UNKNOWN_BARBER_NAME))

    time_clock_service = TimeClockService(entries_repo, day_tz=day_tz)
    report_service = TimeTrackingReportService(
        entries_repo,
        barbers_repo,
        day_tz=day_tz,
        unknown_name=unknown_name,
    )

    return Container(
        entries_repo=entries_repo,
        barbers_repo=barbers_repo,
        day_tz=day_tz,
        display_tz=display_tz,
        time_clock_service=time_clock_service,
        report_service=report_service,
    )
