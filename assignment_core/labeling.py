# assignment_core/labeling.py
from __future__ import annotations
from enum import IntEnum
from typing import List, Optional
import numpy as np

from assignment_core.errors import InvariantViolation


class Mark(IntEnum):
    NONE = 0
    STAR = 1
    PRIME = 2


def _first(flags: np.ndarray) -> Optional[int]:
    idx = np.flatnonzero(flags)
    return int(idx[0]) if idx.size else None


class Labeling:
    """
    Star/prime marks over the working matrix plus the row and column covers.

    Stars are the current partial matching, primes the search frontier of the
    augmenting-path search.
    """

    def __init__(self, n_rows: int, n_cols: int):
        self.marks = np.zeros((n_rows, n_cols), dtype=np.int8)
        self.row_cover = np.zeros(n_rows, dtype=bool)
        self.col_cover = np.zeros(n_cols, dtype=bool)

    @property
    def shape(self):
        return self.marks.shape

    def star(self, i: int, j: int) -> None:
        self.marks[i, j] = Mark.STAR

    def prime(self, i: int, j: int) -> None:
        self.marks[i, j] = Mark.PRIME

    def unmark(self, i: int, j: int) -> None:
        self.marks[i, j] = Mark.NONE

    def is_starred(self, i: int, j: int) -> bool:
        return self.marks[i, j] == Mark.STAR

    def is_primed(self, i: int, j: int) -> bool:
        return self.marks[i, j] == Mark.PRIME

    def star_in_row(self, i: int) -> Optional[int]:
        return _first(self.marks[i] == Mark.STAR)

    def star_in_column(self, j: int) -> Optional[int]:
        return _first(self.marks[:, j] == Mark.STAR)

    def prime_in_row(self, i: int) -> Optional[int]:
        return _first(self.marks[i] == Mark.PRIME)

    def erase_primes(self) -> None:
        self.marks[self.marks == Mark.PRIME] = Mark.NONE

    def clear_covers(self) -> None:
        self.row_cover[:] = False
        self.col_cover[:] = False

    def cover_starred_columns(self) -> int:
        """Cover every column holding a star; returns the covered count."""
        self.col_cover |= (self.marks == Mark.STAR).any(axis=0)
        return int(self.col_cover.sum())

    def star_count(self) -> int:
        return int((self.marks == Mark.STAR).sum())

    def starred_columns(self) -> List[Optional[int]]:
        return [self.star_in_row(i) for i in range(self.marks.shape[0])]

    def check(self) -> None:
        stars = self.marks == Mark.STAR
        if (stars.sum(axis=1) > 1).any():
            raise InvariantViolation("more than one starred zero in a row")
        if (stars.sum(axis=0) > 1).any():
            raise InvariantViolation("more than one starred zero in a column")
