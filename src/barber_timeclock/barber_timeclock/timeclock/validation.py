from __future__ import annotations

from typing import Optional, Sequence, Union

from ..core.enums import ClockState, EntryType
from .model import ClockActionResult, TimeEntry

MUST_CLOCK_IN_FIRST = "Must clock in first"
ALREADY_CLOCKED_IN = "Already clocked in"
MUST_END_BREAK = "Must end break before clocking out"
NOT_CLOCKED_IN = "Not clocked in"
CANNOT_START_BREAK = "Must clock in first or end current break"
NO_BREAK_TO_END = "No break to end"
INVALID_ACTION = "Invalid action type"

# Entry kind of the latest entry -> entry kinds that may follow it.
_TRANSITIONS: dict[Optional[EntryType], frozenset[EntryType]] = {
    None: frozenset({EntryType.CLOCK_IN}),
    EntryType.CLOCK_IN: frozenset({EntryType.CLOCK_OUT, EntryType.BREAK_START}),
    EntryType.CLOCK_OUT: frozenset({EntryType.CLOCK_IN}),
    EntryType.BREAK_START: frozenset({EntryType.BREAK_END}),
    EntryType.BREAK_END: frozenset({EntryType.CLOCK_OUT, EntryType.BREAK_START}),
}

_REJECT_REASONS = {
    EntryType.CLOCK_IN: ALREADY_CLOCKED_IN,
    EntryType.CLOCK_OUT: NOT_CLOCKED_IN,
    EntryType.BREAK_START: CANNOT_START_BREAK,
    EntryType.BREAK_END: NO_BREAK_TO_END,
}


def validate_clock_action(entries: Sequence[TimeEntry], action: Union[EntryType, str]) -> ClockActionResult:
    """Decide whether ``action`` may be recorded after ``entries``.

    Only the type of the last entry in the given order matters. The caller
    passes the barber's entries for the current day, oldest first.
    """
    try:
        action = EntryType(action)
    except ValueError:
        return ClockActionResult.reject(INVALID_ACTION)

    last = entries[-1].entry_type if entries else None
    if action in _TRANSITIONS[last]:
        return ClockActionResult.ok()

    if last is None:
        return ClockActionResult.reject(MUST_CLOCK_IN_FIRST)
    if action == EntryType.CLOCK_OUT and last == EntryType.BREAK_START:
        return ClockActionResult.reject(MUST_END_BREAK)
    return ClockActionResult.reject(_REJECT_REASONS[action])


def current_clock_state(entries: Sequence[TimeEntry]) -> ClockState:
    if not entries:
        return ClockState.OFF
    last = entries[-1].entry_type
    if last == EntryType.BREAK_START:
        return ClockState.ON_BREAK
    if last in (EntryType.CLOCK_IN, EntryType.BREAK_END):
        return ClockState.CLOCKED_IN
    return ClockState.OFF


def allowed_actions(entries: Sequence[TimeEntry]) -> list[EntryType]:
    """Entry kinds that would validate next, in declaration order."""
    return [action for action in EntryType if validate_clock_action(entries, action)]
