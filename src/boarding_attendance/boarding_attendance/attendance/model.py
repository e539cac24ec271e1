from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceEvent:
    """One successful scan: a copy of the roster entry plus the capture time."""

    adm_no: str
    name: str
    class_sec: str
    timestamp: datetime
    event_id: Optional[int] = None
