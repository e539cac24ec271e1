from __future__ import annotations

import threading
import time
import uuid
from collections import OrderedDict
from typing import Callable, Optional

from ..core.constants import UI_SESSION_IDLE_SECONDS, UI_SESSION_MAX
from ..report.date_range import DateRangeSelection
from .session import ScannerSession


class UiSession:
    """Everything one open page owns: the scan buffer and the two report dates."""

    def __init__(self, scanner: ScannerSession, dates: Optional[DateRangeSelection] = None):
        self.scanner = scanner
        self.dates = dates or DateRangeSelection()
        # Keys from one page are handled one at a time, lookup included.
        self.lock = threading.Lock()


class UiSessionRegistry:
    """Per-browser UiSessions, keyed by an id kept in the Flask session cookie.

    Entries idle for longer than ``idle_seconds`` are dropped, and the least
    recently used ones go first once ``max_sessions`` is reached.
    """

    def __init__(
        self,
        factory: Callable[[], UiSession],
        *,
        idle_seconds: float = UI_SESSION_IDLE_SECONDS,
        max_sessions: int = UI_SESSION_MAX,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_sessions <= 0:
            raise ValueError("max_sessions must be positive")
        self._factory = factory
        self._idle_seconds = float(idle_seconds)
        self._max_sessions = int(max_sessions)
        self._clock = clock
        # Ordered oldest-used first.
        self._sessions: OrderedDict[str, tuple[UiSession, float]] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_id: Optional[str]) -> Optional[UiSession]:
        """The live session for ``session_id``, without creating one."""

        with self._lock:
            now = self._clock()
            self._sweep(now)
            return self._touch(session_id, now)

    def get_or_create(self, session_id: Optional[str]) -> tuple[str, UiSession]:
        with self._lock:
            now = self._clock()
            self._sweep(now)
            ui = self._touch(session_id, now)
            if ui is not None:
                return session_id, ui

            new_id = session_id or uuid.uuid4().hex
            ui = self._factory()
            self._sessions[new_id] = (ui, now)
            while len(self._sessions) > self._max_sessions:
                self._sessions.popitem(last=False)
            return new_id, ui

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _touch(self, session_id: Optional[str], now: float) -> Optional[UiSession]:
        if not session_id or session_id not in self._sessions:
            return None
        ui, _ = self._sessions[session_id]
        self._sessions[session_id] = (ui, now)
        self._sessions.move_to_end(session_id)
        return ui

    def _sweep(self, now: float) -> None:
        while self._sessions:
            oldest_id, (_, last_used) = next(iter(self._sessions.items()))
            if now - last_used <= self._idle_seconds:
                break
            self._sessions.pop(oldest_id)
