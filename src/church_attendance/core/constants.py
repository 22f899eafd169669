"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Storage keys, one serialized collection each.
USERS_KEY = "users"
CHURCHES_KEY = "churches"
DEPARTMENTS_KEY = "departments"
CLASSES_KEY = "classes"
STUDENTS_KEY = "students"

ALL_COLLECTION_KEYS = (USERS_KEY, CHURCHES_KEY, DEPARTMENTS_KEY, CLASSES_KEY, STUDENTS_KEY)

# Number of most recent dates taken per student for the dashboard series.
STATS_WINDOW_DATES = 4

JOIN_CODE_PREFIX_LENGTH = 3
JOIN_CODE_MAX_NUMBER = 999
JOIN_CODE_MAX_ATTEMPTS = 50

MIN_PASSWORD_LENGTH = 3

DEFAULT_INSIGHT_MODEL = "gemini-2.5-flash"
DEFAULT_INSIGHT_TIMEOUT_SECONDS = 20
INSIGHT_MAX_CHARS = 150
