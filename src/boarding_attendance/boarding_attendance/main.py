from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .common.logging_setup import configure_logging
from .container import Container, build_container
from .core.constants import EXPECTED_ID_LENGTH, EXPORT_FILENAME, UI_SESSION_IDLE_SECONDS, UI_SESSION_MAX
from .core.exceptions import ValidationError
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .report.controller import register as register_report
from .scanner.controller import register as register_scanner

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(*, container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Pass ``container`` to run against in-memory repositories (tests); otherwise
    the MySQL container is built from the active settings module.
    """

    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"), static_folder=str(REPO_ROOT / "static"))

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), log_file=getattr(settings, "LOG_FILE", None))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            logger.info("demo roster ready")

        container = build_container(
            db_config=db_config,
            expected_length=int(getattr(settings, "EXPECTED_ID_LENGTH", EXPECTED_ID_LENGTH)),
            export_filename=str(getattr(settings, "EXPORT_FILENAME", EXPORT_FILENAME)),
            ui_session_idle_seconds=float(getattr(settings, "UI_SESSION_IDLE_SECONDS", UI_SESSION_IDLE_SECONDS)),
            ui_session_max=int(getattr(settings, "UI_SESSION_MAX", UI_SESSION_MAX)),
        )

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_scanner(app, container)
    register_report(app, container)

    return app
