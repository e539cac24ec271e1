from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import day_bounds
from ..core.constants import EXPORT_FILENAME, EXPORT_SHEET_NAME, XLSX_MIMETYPE
from ..core.exceptions import StoreError
from .xlsx import rows_to_xlsx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportFile:
    filename: str
    content: bytes
    mimetype: str = XLSX_MIMETYPE


class ReportExportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        filename: str = EXPORT_FILENAME,
        sheet_name: str = EXPORT_SHEET_NAME,
    ):
        self._attendance = attendance
        self._filename = filename
        self._sheet_name = sheet_name

    def export(self, start: date, end: date) -> Optional[ReportFile]:
        """Attendance events from ``start`` through ``end`` (both days included) as xlsx.

        Returns None when there is nothing to download, including when the
        query fails (the failure is logged).
        """

        lower, upper = day_bounds(start, end)
        try:
            rows = self._attendance.list_between(start=lower, end=upper)
        except StoreError:
            logger.exception("Export %s..%s: query failed", start, end)
            return None

        if not rows:
            logger.info("Export %s..%s: no attendance events", start, end)
            return None

        content = rows_to_xlsx(rows, sheet_name=self._sheet_name)
        logger.info("Export %s..%s: %d rows", start, end, len(rows))
        return ReportFile(filename=self._filename, content=content)
