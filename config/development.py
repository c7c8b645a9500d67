import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# 'memory' keeps everything in process; 'mysql' persists to DB_CONFIG
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory")

# If enabled (mysql only), app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Register the demo roster when no employee exists yet
AUTO_SEED_ROSTER = bool(int(os.getenv("AUTO_SEED_ROSTER", "1")))

REPORT_PERIOD_DAYS = int(os.getenv("REPORT_PERIOD_DAYS", "30"))
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "10"))
