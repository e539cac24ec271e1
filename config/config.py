"""Settings shared by every environment module."""

import os


def db_config_from_env(*, default_password: str = "", default_name: str = "boarding_attendance") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", default_name),
    }


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


# Scanner emits admission numbers of this many digits, with no terminator.
EXPECTED_ID_LENGTH = int(os.getenv("EXPECTED_ID_LENGTH", "8"))
EXPORT_FILENAME = os.getenv("EXPORT_FILENAME", "attendance_new.xlsx")

LOG_FILE = os.getenv("LOG_FILE")

UI_SESSION_IDLE_SECONDS = int(os.getenv("UI_SESSION_IDLE_SECONDS", str(8 * 60 * 60)))
UI_SESSION_MAX = int(os.getenv("UI_SESSION_MAX", "1000"))
