from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from ..core.constants import EVENTS_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, table: str = EVENTS_TABLE):
        self._conn_factory = conn_factory
        self._table = table

    def insert_event(self, *, adm_no: str, name: str, class_sec: str, timestamp: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {self._table}(adm_no, name, class_sec, timestamp)
                VALUES(%s,%s,%s,%s)
                """,
                (adm_no, name, class_sec, timestamp),
            )
            return int(cur.lastrowid)

    def list_between(self, *, start: datetime, end: datetime) -> Sequence[dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT *
                FROM {self._table}
                WHERE timestamp >= %s AND timestamp <= %s
                ORDER BY timestamp, id
                """,
                (start, end),
            )
            return fetchall(cur)
