"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DB_POOL_SIZE = 5
DEFAULT_DB_POOL_NAME = "user_api"
DEFAULT_HASH_WORKERS = 2

# Path ids are signed 32-bit integers (INT column).
USER_ID_MIN = -(2**31)
USER_ID_MAX = 2**31 - 1
