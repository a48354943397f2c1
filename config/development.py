import os

from config.cohorts import COHORT_PROFILES, secret_hashes_from_env

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "cohort_attendance"),
}

COHORT_SECRET_HASHES = secret_hashes_from_env()

UPCOMING_BIRTHDAY_DAYS = int(os.getenv("UPCOMING_BIRTHDAY_DAYS", "7"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, bootstrap applies schema.sql (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
