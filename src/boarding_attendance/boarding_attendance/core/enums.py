from __future__ import annotations

from enum import Enum


class ScanOutcome(str, Enum):
    """Result of one lookup-and-record attempt (logged, never shown to the user)."""

    RECORDED = "RECORDED"
    NOT_FOUND = "NOT_FOUND"
    FAILED = "FAILED"
