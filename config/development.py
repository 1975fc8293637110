import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Calendar day used for "today" in the time clock and for report ranges
DAY_TIMEZONE = os.getenv("DAY_TIMEZONE", "UTC")
# Timezone used when rendering clock times
DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "America/New_York")

UNKNOWN_BARBER_NAME = os.getenv("UNKNOWN_BARBER_NAME", "Unknown")
REPORT_DAYS = int(os.getenv("REPORT_DAYS", "7"))
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

DEBUG = True
