from __future__ import annotations

from typing import Callable

BufferListener = Callable[[str, str], None]


class ScanBuffer:
    """Observable text buffer fed by scanner keystrokes.

    Listeners are called with ``(old, new)`` only when the value actually
    changes.
    """

    def __init__(self, value: str = ""):
        self._value = value
        self._listeners: list[BufferListener] = []

    @property
    def value(self) -> str:
        return self._value

    def __len__(self) -> int:
        return len(self._value)

    def subscribe(self, listener: BufferListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def append(self, ch: str) -> None:
        self._set(self._value + ch)

    def pop(self) -> None:
        self._set(self._value[:-1])

    def replace(self, text: str) -> None:
        self._set(text)

    def clear(self) -> None:
        self._set("")

    def _set(self, new: str) -> None:
        old = self._value
        if new == old:
            return
        self._value = new
        for listener in list(self._listeners):
            listener(old, new)


class LengthTrigger:
    """Buffer listener firing ``callback(value)`` when the length reaches ``expected_length``."""

    def __init__(self, expected_length: int, callback: Callable[[str], None]):
        if expected_length <= 0:
            raise ValueError("expected_length must be positive")
        self._expected = int(expected_length)
        self._callback = callback

    @property
    def expected_length(self) -> int:
        return self._expected

    def __call__(self, old: str, new: str) -> None:
        if len(new) == self._expected:
            self._callback(new)
