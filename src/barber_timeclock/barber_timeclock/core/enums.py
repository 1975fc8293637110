from __future__ import annotations

from enum import Enum


class EntryType(str, Enum):
    """Clock action recorded in a time entry."""

    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"
    BREAK_START = "break_start"
    BREAK_END = "break_end"


class ShiftStatus(str, Enum):
    """Status of a shift reconstructed from one day of entries."""

    COMPLETE = "complete"
    IN_PROGRESS = "in_progress"
    ON_BREAK = "on_break"
    INCOMPLETE = "incomplete"


class ClockState(str, Enum):
    """What the time-clock card shows, based on the latest entry only."""

    OFF = "off"
    CLOCKED_IN = "clocked_in"
    ON_BREAK = "on_break"


class ShiftIssue(str, Enum):
    MISSING_PUNCH = "Missing clock-in or clock-out"
    BREAK_NOT_ENDED = "Break not ended"
    SHIFT_IN_PROGRESS = "Shift in progress"
    CURRENTLY_ON_BREAK = "Currently on break"
