"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MS_PER_HOUR = 1000 * 60 * 60
UNKNOWN_BARBER_NAME = "Unknown"
DEFAULT_REPORT_DAYS = 7

REPORT_FIELDS = [
    "date",
    "barber_id",
    "barber_name",
    "clock_in",
    "clock_out",
    "status",
    "total_hours",
    "break_hours",
    "net_hours",
    "entry_count",
    "issue",
]
