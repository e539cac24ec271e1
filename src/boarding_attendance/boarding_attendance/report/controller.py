from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..report.date_range import DateRangeSelection
from ..scanner.controller import current_ui_session, existing_ui_session, json_body


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dates", methods=["POST"], endpoint="api_dates")
    def api_dates():
        data = json_body()
        ui = current_ui_session(container)

        accepted = True
        with ui.lock:
            if data.get("start"):
                accepted = ui.dates.pick_start(parse_iso_date(data["start"])) and accepted
            if data.get("end"):
                accepted = ui.dates.pick_end(parse_iso_date(data["end"])) and accepted
            payload = ui.dates.as_dict()

        return jsonify({**payload, "accepted": accepted})

    @app.route("/attendance/export", methods=["GET"], endpoint="attendance_export")
    def attendance_export():
        ui = existing_ui_session(container)
        dates = ui.dates if ui is not None else DateRangeSelection()

        start_s = request.args.get("start")
        end_s = request.args.get("end")
        start = parse_iso_date(start_s) if start_s else dates.start
        end = parse_iso_date(end_s) if end_s else dates.end

        report = container.report_service.export(start, end)
        if report is None:
            return "", 204

        return send_file(
            io.BytesIO(report.content),
            mimetype=report.mimetype,
            as_attachment=True,
            download_name=report.filename,
        )
