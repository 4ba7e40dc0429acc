"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Logical collections in the key-value store.
ACCOUNTS_KEY = "accounts"
SESSION_POINTER_KEY = "session-pointer"
ATTENDANCE_KEY = "attendance-records"
LEAVES_KEY = "leave-requests"
PAYROLL_KEY = "payroll-records"

DEFAULT_AUTH_DELAY_SECONDS = 0.5
DEFAULT_HISTORY_LIMIT = 30
PASSWORD_MIN_LENGTH = 8
DEFAULT_LEAVE_TYPE = "Paid Leave"
SESSION_TOKEN_PREFIX = "session-"
