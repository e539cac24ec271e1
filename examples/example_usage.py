"""Example: record a scan and export today's report through the service layer (no Flask).

Controllers are a thin layer; the business flow lives in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.boarding_attendance.boarding_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    print(container.attendance_service.record_scan("12345678"))

    report = container.report_service.export(date.today(), date.today())
    if report is None:
        print("Nothing to export today")
        return
    with open(report.filename, "wb") as f:
        f.write(report.content)
    print(f"Wrote {report.filename} ({len(report.content)} bytes)")


if __name__ == "__main__":
    main()
