from __future__ import annotations

from typing import Protocol, Sequence

from .model import RosterEntry


class RosterRepository(Protocol):
    def find_by_adm_no(self, adm_no: str) -> Sequence[RosterEntry]:
        """All entries whose admission number equals ``adm_no`` exactly, in store order."""

        raise NotImplementedError
