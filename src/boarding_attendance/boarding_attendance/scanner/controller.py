from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, render_template, request, session

from ..container import Container
from .session import KeyResult
from .ui_session import UiSession

SESSION_KEY = "ui_session_id"


def json_body() -> dict:
    """Request JSON object, or {} for a missing, malformed or non-object body."""

    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def current_ui_session(container: Container) -> UiSession:
    """UiSession of the calling browser, created on first use."""

    session_id, ui = container.ui_sessions.get_or_create(session.get(SESSION_KEY))
    session[SESSION_KEY] = session_id
    return ui


def existing_ui_session(container: Container) -> Optional[UiSession]:
    """UiSession of the calling browser if it already has one; never creates."""

    return container.ui_sessions.get(session.get(SESSION_KEY))


def _key_result_json(result: KeyResult):
    return jsonify(
        {
            "buffer": result.buffer,
            "prevent_default": result.prevent_default,
            "submitted": result.submitted,
        }
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    def index():
        ui = current_ui_session(container)
        return render_template(
            "index.html",
            buffer=ui.scanner.buffer,
            dates=ui.dates.as_dict(),
            expected_length=ui.scanner.expected_length,
        )

    @app.route("/api/scanner/key", methods=["POST"], endpoint="api_scanner_key")
    def api_scanner_key():
        data = json_body()
        key = str(data.get("key") or "")

        ui = current_ui_session(container)
        with ui.lock:
            result = ui.scanner.key_down(key)
        return _key_result_json(result)

    @app.route("/api/scanner/input", methods=["POST"], endpoint="api_scanner_input")
    def api_scanner_input():
        data = json_body()
        value = str(data.get("value") or "")

        ui = current_ui_session(container)
        with ui.lock:
            result = ui.scanner.replace(value)
        return _key_result_json(result)
