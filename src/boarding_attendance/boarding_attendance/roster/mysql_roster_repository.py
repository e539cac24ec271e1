from __future__ import annotations

from typing import Sequence

from ..core.constants import ROSTER_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import RosterEntry
from .repository import RosterRepository


class MySQLRosterRepository(RosterRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, table: str = ROSTER_TABLE):
        self._conn_factory = conn_factory
        self._table = table

    def find_by_adm_no(self, adm_no: str) -> Sequence[RosterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT * FROM {self._table} WHERE adm_no=%s", (adm_no,))
            rows = fetchall(cur)
            return [
                RosterEntry(
                    adm_no=str(r["adm_no"]),
                    name=str(r.get("name") or ""),
                    class_sec=str(r.get("class_sec") or ""),
                )
                for r in rows
            ]
