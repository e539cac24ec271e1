import os

from .config import EXPECTED_ID_LENGTH, EXPORT_FILENAME, UI_SESSION_IDLE_SECONDS, UI_SESSION_MAX, LOG_FILE, db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env(default_password="123456")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also seed demo roster entries on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
