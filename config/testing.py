LOG_LEVEL = "WARNING"

DAY_TIMEZONE = "UTC"
DISPLAY_TIMEZONE = "UTC"

UNKNOWN_BARBER_NAME = "Unknown"
REPORT_DAYS = 7
EXPORT_DIR = "exports"

DEBUG = False
TESTING = True
