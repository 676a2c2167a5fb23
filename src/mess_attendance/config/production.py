import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "mess"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "mess_attendance"),
    "connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "5")),
}

MARK_DEADLINE_TIME = os.getenv("MARK_DEADLINE_TIME", "19:00")
MARK_ADVANCE_DAYS = int(os.getenv("MARK_ADVANCE_DAYS", "7"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
