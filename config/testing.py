import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"
DATA_DIR = None

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "church_attendance_test"),
}

AUTO_INIT_DB = False
AUTO_SEED_DB = False

# Insights stay offline in tests
GEMINI_API_KEY = ""
GEMINI_MODEL = "gemini-2.5-flash"
INSIGHT_LANGUAGE = "ko"
INSIGHT_TIMEOUT_SECONDS = 1
