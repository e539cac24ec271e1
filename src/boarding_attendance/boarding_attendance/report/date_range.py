from __future__ import annotations

from datetime import date
from typing import Optional


class DateRangeSelection:
    """The two report date pickers.

    The end picker refuses dates before the selected start. Moving the start
    past the end is allowed; the export then simply finds nothing.
    """

    def __init__(self, start: Optional[date] = None, end: Optional[date] = None):
        today = date.today()
        self._start = start or today
        self._end = end or today

    @property
    def start(self) -> date:
        return self._start

    @property
    def end(self) -> date:
        return self._end

    @property
    def min_end(self) -> date:
        return self._start

    def pick_start(self, value: date) -> bool:
        self._start = value
        return True

    def pick_end(self, value: date) -> bool:
        if value < self.min_end:
            return False
        self._end = value
        return True

    def as_dict(self) -> dict:
        return {
            "start": self._start.strftime("%Y-%m-%d"),
            "end": self._end.strftime("%Y-%m-%d"),
            "min_end": self.min_end.strftime("%Y-%m-%d"),
        }
