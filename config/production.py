import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_ROSTER = bool(int(os.getenv("AUTO_SEED_ROSTER", "0")))

REPORT_PERIOD_DAYS = int(os.getenv("REPORT_PERIOD_DAYS", "30"))
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "10"))
