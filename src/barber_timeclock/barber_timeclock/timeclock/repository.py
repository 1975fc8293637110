from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import EntryType
from .model import TimeEntry


class TimeEntryRepository(Protocol):
    """Insert-only store of time entries (``barber_time_entries``)."""

    def list_entries(
        self,
        *,
        start: datetime,
        end: datetime,
        barber_id: Optional[str] = None,
    ) -> Sequence[TimeEntry]:
        """Entries with ``start <= timestamp < end``, oldest first."""

        raise NotImplementedError

    def add_entry(
        self,
        *,
        barber_id: str,
        entry_type: EntryType,
        timestamp: datetime,
        note: Optional[str] = None,
    ) -> TimeEntry:
        raise NotImplementedError
