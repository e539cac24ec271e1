from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.constants import BACKSPACE_KEYS, EXPECTED_ID_LENGTH
from .buffer import LengthTrigger, ScanBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyResult:
    buffer: str
    prevent_default: bool = False
    submitted: bool = False


def is_digit_key(key: str) -> bool:
    return len(key) == 1 and "0" <= key <= "9"


class ScannerSession:
    """Barcode capture for one input field.

    A keyboard-wedge scanner types the digits with no terminator, so the only
    completion signal is the buffer reaching ``expected_length``. At that
    point ``on_complete`` runs once; whatever it does, the buffer is emptied
    afterwards so the field is ready for the next scan.
    """

    def __init__(
        self,
        on_complete: Callable[[str], object],
        *,
        expected_length: int = EXPECTED_ID_LENGTH,
    ):
        self._on_complete = on_complete
        self._buffer = ScanBuffer()
        self._trigger = LengthTrigger(expected_length, self._submit)
        self._buffer.subscribe(self._trigger)
        self._submitted = False

    @property
    def buffer(self) -> str:
        return self._buffer.value

    @property
    def expected_length(self) -> int:
        return self._trigger.expected_length

    def key_down(self, key: str) -> KeyResult:
        self._submitted = False

        if key in BACKSPACE_KEYS:
            self._buffer.pop()
            return self._result()

        if is_digit_key(key):
            # Digits are suppressed in the field to avoid double entry.
            self._buffer.append(key)
            return self._result(prevent_default=True)

        return self._result()

    def replace(self, text: Optional[str]) -> KeyResult:
        """Explicit edit of the whole field (paste, cut, native deletion)."""

        self._submitted = False
        self._buffer.replace(text or "")
        return self._result()

    def _submit(self, value: str) -> None:
        try:
            self._on_complete(value)
        except Exception:
            logger.exception("Scan %s: lookup-and-record raised", value)
        finally:
            self._submitted = True
            self._buffer.clear()

    def _result(self, *, prevent_default: bool = False) -> KeyResult:
        return KeyResult(buffer=self._buffer.value, prevent_default=prevent_default, submitted=self._submitted)
