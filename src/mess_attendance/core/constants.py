"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

DEFAULT_DEADLINE_TIME = "19:00"
DEFAULT_ADVANCE_DAYS = 7
DEFAULT_CONNECT_TIMEOUT = 10

# MySQL server error numbers
ER_DUP_ENTRY = 1062
ER_LOCK_WAIT_TIMEOUT = 1205
ER_LOCK_DEADLOCK = 1213
