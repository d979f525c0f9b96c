# assignment_core/reduced_cost.py
"""
Reduced-cost view over a cost matrix plus the per-row index of its zeros.

The cost matrix itself is never written to. Reductions are kept as one offset
per row and one per column, so the effective cost of a cell is

    cost[i, j] - row_offset[i] - col_offset[j]

and is recomputed whenever it is asked for.
"""
from __future__ import annotations
from typing import Iterable, List, Optional, Set, Tuple
import numpy as np

from assignment_core.location import Location


class ReducedCost:
    def __init__(self, cost: np.ndarray):
        self.cost = cost
        n, m = cost.shape
        self.row_offset = np.zeros(n, dtype=cost.dtype)
        self.col_offset = np.zeros(m, dtype=cost.dtype)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cost.shape

    def effective(self, i: int, j: int):
        return self.cost[i, j] - self.row_offset[i] - self.col_offset[j]

    def __getitem__(self, ij: Tuple[int, int]):
        i, j = ij
        return self.effective(i, j)

    def block(self, rows: np.ndarray, cols: np.ndarray) -> np.ndarray:
        """Effective costs of the sub-matrix rows x cols (a fresh array)."""
        sub = self.cost[np.ix_(rows, cols)]
        return sub - self.row_offset[rows][:, None] - self.col_offset[cols][None, :]

    def initialize_row_offsets(self) -> None:
        self.row_offset = self.cost.min(axis=1)

    def uncovered_minimum(
        self, row_cover: np.ndarray, col_cover: np.ndarray
    ) -> Tuple[object, List[Location]]:
        """
        Smallest effective cost over uncovered rows x uncovered columns and
        every cell attaining it, in row-major order.
        """
        rows = np.flatnonzero(~row_cover)
        cols = np.flatnonzero(~col_cover)
        if rows.size == 0 or cols.size == 0:
            return None, []
        sub = self.block(rows, cols)
        min_value = sub.min()
        hit_r, hit_c = np.nonzero(sub == min_value)
        cells = [Location(int(rows[a]), int(cols[b])) for a, b in zip(hit_r, hit_c)]
        return min_value, cells

    def reduce_by_global_minimum(
        self, min_value, row_cover: np.ndarray, col_cover: np.ndarray
    ) -> None:
        # covered rows up, uncovered columns down; keeps every cell >= 0
        self.row_offset[row_cover] -= min_value
        self.col_offset[~col_cover] += min_value


class ZeroIndex:
    """Columns holding a zero effective cost, kept per row."""

    def __init__(self, n_rows: int):
        self.rows: List[Set[int]] = [set() for _ in range(n_rows)]

    @classmethod
    def build(cls, reduced: ReducedCost) -> "ZeroIndex":
        n, m = reduced.shape
        index = cls(n)
        zero_r, zero_c = np.nonzero(reduced.block(np.arange(n), np.arange(m)) == 0)
        for i, j in zip(zero_r, zero_c):
            index.rows[int(i)].add(int(j))
        return index

    def __len__(self) -> int:
        return sum(len(cols) for cols in self.rows)

    def columns(self, i: int) -> List[int]:
        return sorted(self.rows[i])

    def add(self, i: int, j: int) -> None:
        self.rows[i].add(j)

    def first_uncovered(self, i: int, col_cover: np.ndarray) -> Optional[int]:
        """Lowest uncovered zero column in row i, or None."""
        free = [j for j in self.rows[i] if not col_cover[j]]
        return min(free) if free else None

    def patch(
        self,
        new_zeros: Iterable[Location],
        row_cover: np.ndarray,
        col_cover: np.ndarray,
        min_value,
    ) -> None:
        """
        Bring the index in line with a step-six offset change of ``min_value``.

        Cells in a covered row and a covered column rose by ``min_value`` and
        stop being zeros; the argmin cells of the uncovered block fell to zero.
        """
        if min_value > 0:
            for i in np.flatnonzero(row_cover):
                row = self.rows[int(i)]
                gone = [j for j in row if col_cover[j]]
                row.difference_update(gone)
        for loc in new_zeros:
            self.add(loc.row, loc.col)
