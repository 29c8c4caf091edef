import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

MAX_CONTENT_LENGTH = 1024 * 1024
FILTER_PUSHDOWN = False

AUTO_INIT_DB = False
