import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DAY_TIMEZONE = os.getenv("DAY_TIMEZONE", "UTC")
DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "America/New_York")

UNKNOWN_BARBER_NAME = os.getenv("UNKNOWN_BARBER_NAME", "Unknown")
REPORT_DAYS = int(os.getenv("REPORT_DAYS", "7"))
EXPORT_DIR = os.getenv("EXPORT_DIR", "/var/lib/barber-timeclock/exports")

DEBUG = False
