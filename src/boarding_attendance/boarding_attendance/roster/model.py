from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RosterEntry:
    """A known student, keyed by admission number (the barcode value).

    The roster is maintained outside this application; we only read it.
    """

    adm_no: str
    name: str
    class_sec: str
