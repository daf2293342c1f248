"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

ELAPSED_ZERO = "00:00:00"
EMPTY_TIME_PLACEHOLDER = "--:--"

RECORD_ID_PREFIX = "ATT"
DEFAULT_TICK_SECONDS = 1.0

ADMIN_EMPLOYEE_ID = "ADMIN001"
