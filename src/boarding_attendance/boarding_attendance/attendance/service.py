from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import ScanOutcome
from ..core.exceptions import StoreError
from ..roster.repository import RosterRepository
from .model import AttendanceEvent
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Lookup-and-record: turn a completed barcode into an attendance event.

    Failures are logged and reported as ``ScanOutcome.FAILED``; nothing is
    raised to the caller and nothing is retried.
    """

    def __init__(
        self,
        roster: RosterRepository,
        attendance: AttendanceRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._roster = roster
        self._attendance = attendance
        self._clock = clock

    def record_scan(self, adm_no: str, *, now: Optional[datetime] = None) -> ScanOutcome:
        try:
            matches = self._roster.find_by_adm_no(adm_no)
            if not matches:
                logger.info("Scan %s: no roster entry", adm_no)
                return ScanOutcome.NOT_FOUND

            entry = matches[0]
            event = AttendanceEvent(
                adm_no=entry.adm_no,
                name=entry.name,
                class_sec=entry.class_sec,
                timestamp=now or self._clock(),
            )
            event_id = self._attendance.insert_event(
                adm_no=event.adm_no,
                name=event.name,
                class_sec=event.class_sec,
                timestamp=event.timestamp,
            )
        except StoreError:
            logger.exception("Scan %s: could not record attendance", adm_no)
            return ScanOutcome.FAILED

        logger.info("Scan %s: recorded event %s for %s (%s)", adm_no, event_id, event.name, event.class_sec)
        return ScanOutcome.RECORDED
