# assignment_core/location.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    row: int
    col: int

    @property
    def valid(self) -> bool:
        return self.row >= 0 and self.col >= 0


INVALID_LOCATION = Location(-1, -1)
