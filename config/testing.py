SECRET_KEY = "test-secret"

DB_CONFIG = {}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORE_BACKEND = "memory"

AUTO_INIT_DB = False
AUTO_SEED_ROSTER = True

REPORT_PERIOD_DAYS = 30
PAGE_SIZE = 10
