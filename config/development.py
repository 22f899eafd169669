import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# memory | file | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "data")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "church_attendance"),
}

# If enabled with the mysql backend, the kv_store table is created on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: overwrite all collections with the demo dataset on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
INSIGHT_LANGUAGE = os.getenv("INSIGHT_LANGUAGE", "ko")
INSIGHT_TIMEOUT_SECONDS = float(os.getenv("INSIGHT_TIMEOUT_SECONDS", "20"))
