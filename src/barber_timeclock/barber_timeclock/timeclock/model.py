from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_timestamp
from ..core.enums import EntryType, ShiftIssue, ShiftStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one clock action by one barber at one instant.

    Entries are an audit trail; they are never updated or deleted.
    """

    entry_id: str
    barber_id: str
    entry_type: EntryType
    timestamp: datetime
    note: Optional[str] = None

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "TimeEntry":
        """Build an entry from a storage row or JSON record.

        Accepts the ``barber_time_entries`` column names (``id``,
        ``barber_id``, ``entry_type``, ``timestamp``, ``note``).
        """
        if not isinstance(row, Mapping):
            raise ValidationError(f"Time entry must be an object, got {type(row).__name__}")

        try:
            entry_type = EntryType(row["entry_type"])
        except (KeyError, ValueError) as exc:
            raise ValidationError(f"Invalid entry type: {row.get('entry_type')!r}") from exc

        entry_id = row.get("id", row.get("entry_id"))
        if entry_id is None or "barber_id" not in row or "timestamp" not in row:
            raise ValidationError("Time entry requires id, barber_id and timestamp")

        return cls(
            entry_id=str(entry_id),
            barber_id=str(row["barber_id"]),
            entry_type=entry_type,
            timestamp=parse_iso_timestamp(row["timestamp"]),
            note=row.get("note") or None,
        )


@dataclass(frozen=True)
class BreakInterval:
    start: datetime
    end: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.end is None


@dataclass(frozen=True)
class DailyShift:
    """Shift rebuilt from one barber's entries for one day.

    Durations are whole milliseconds. Open shifts and open breaks are measured
    up to the evaluation instant, so this is a snapshot, never stored.
    """

    date: Optional[date]
    clock_in: Optional[datetime]
    clock_out: Optional[datetime]
    breaks: tuple[BreakInterval, ...]
    total_worked_ms: int
    break_time_ms: int
    net_worked_ms: int
    status: ShiftStatus
    entries: tuple[TimeEntry, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "DailyShift":
        return cls(
            date=None,
            clock_in=None,
            clock_out=None,
            breaks=(),
            total_worked_ms=0,
            break_time_ms=0,
            net_worked_ms=0,
            status=ShiftStatus.INCOMPLETE,
            entries=(),
        )

    @property
    def has_open_break(self) -> bool:
        return any(b.is_open for b in self.breaks)


@dataclass(frozen=True)
class DailySummary:
    """Read-model for the owner's time tracking report."""

    barber_id: str
    barber_name: str
    date: date
    shift: DailyShift
    total_hours: float
    break_hours: float
    net_hours: float
    entry_count: int
    issue: Optional[ShiftIssue] = None

    @property
    def has_issues(self) -> bool:
        return self.issue is not None

    @property
    def issue_description(self) -> Optional[str]:
        return self.issue.value if self.issue else None


@dataclass(frozen=True)
class ClockActionResult:
    valid: bool
    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> "ClockActionResult":
        return cls(valid=True)

    @classmethod
    def reject(cls, reason: str) -> "ClockActionResult":
        return cls(valid=False, reason=reason)

    def __bool__(self) -> bool:
        return self.valid
