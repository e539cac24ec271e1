from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, Sequence


class AttendanceRepository(Protocol):
    def insert_event(self, *, adm_no: str, name: str, class_sec: str, timestamp: datetime) -> int:
        raise NotImplementedError

    def list_between(self, *, start: datetime, end: datetime) -> Sequence[dict[str, Any]]:
        """Raw rows (every stored column) with ``start <= timestamp <= end``.

        Used by the spreadsheet export, which keeps whatever columns the table has.
        """

        raise NotImplementedError
