from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import EXPECTED_ID_LENGTH, EXPORT_FILENAME, UI_SESSION_IDLE_SECONDS, UI_SESSION_MAX
from .database.connection import DBConfig, DatabaseConnection
from .report.service import ReportExportService
from .roster.mysql_roster_repository import MySQLRosterRepository
from .roster.repository import RosterRepository
from .scanner.session import ScannerSession
from .scanner.ui_session import UiSession, UiSessionRegistry


@dataclass(frozen=True)
class Container:
    roster_repo: RosterRepository
    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService
    report_service: ReportExportService
    ui_sessions: UiSessionRegistry


def build_services(
    *,
    roster_repo: RosterRepository,
    attendance_repo: AttendanceRepository,
    expected_length: int = EXPECTED_ID_LENGTH,
    export_filename: str = EXPORT_FILENAME,
    ui_session_idle_seconds: float = UI_SESSION_IDLE_SECONDS,
    ui_session_max: int = UI_SESSION_MAX,
) -> Container:
    attendance_service = AttendanceService(roster_repo, attendance_repo)
    report_service = ReportExportService(attendance_repo, filename=export_filename)

    def new_ui_session() -> UiSession:
        return UiSession(ScannerSession(attendance_service.record_scan, expected_length=expected_length))

    return Container(
        roster_repo=roster_repo,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        report_service=report_service,
        ui_sessions=UiSessionRegistry(
            new_ui_session,
            idle_seconds=ui_session_idle_seconds,
            max_sessions=ui_session_max,
        ),
    )


def build_container(
    *,
    db_config: Mapping,
    expected_length: int = EXPECTED_ID_LENGTH,
    export_filename: str = EXPORT_FILENAME,
    ui_session_idle_seconds: float = UI_SESSION_IDLE_SECONDS,
    ui_session_max: int = UI_SESSION_MAX,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return build_services(
        roster_repo=MySQLRosterRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        expected_length=expected_length,
        export_filename=export_filename,
        ui_session_idle_seconds=ui_session_idle_seconds,
        ui_session_max=ui_session_max,
    )
