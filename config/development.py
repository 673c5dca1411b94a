import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Work-shift inference
SHIFT_SELECTION_MARGIN_MINUTES = int(os.getenv("SHIFT_SELECTION_MARGIN_MINUTES", "240"))
LONG_PAUSE_THRESHOLD_MINUTES = int(os.getenv("LONG_PAUSE_THRESHOLD_MINUTES", "240"))
DAYS_UNTIL_LOCKED = int(os.getenv("DAYS_UNTIL_LOCKED", "3"))
