from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_installed: list[logging.Handler] = []


def configure_logging(level: str = "INFO", *, log_file: Optional[str] = None) -> None:
    """Route application logs to stdout (and optionally a file).

    Scan and export failures are only ever reported here. Calling this again
    replaces the handlers it installed before and leaves any others alone.
    """

    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    for handler in _installed:
        root.removeHandler(handler)
        handler.close()
    _installed.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    _installed.append(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        _installed.append(file_handler)

    for handler in _installed:
        root.addHandler(handler)
