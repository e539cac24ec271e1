import os

from .config import EXPECTED_ID_LENGTH, EXPORT_FILENAME, UI_SESSION_IDLE_SECONDS, UI_SESSION_MAX, db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_password="12345", default_name="boarding_attendance_test")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FILE = None

AUTO_INIT_DB = False
AUTO_SEED_DB = False
