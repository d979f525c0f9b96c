# assignment_core/steps.py
"""
Munkres step machine over a ReducedCost / ZeroIndex / Labeling triple.

Steps 1 and 2 (row reduction, greedy starring) run once; the loop then moves
between steps 3-6 until step 7 is reached:

  3. cover starred columns; done when min(n, m) columns are covered
  4. prime uncovered zeros until one lands in a row without a star
  5. augment along the alternating prime/star path from that zero
  6. shift the offsets by the smallest uncovered reduced cost
"""
from __future__ import annotations
from enum import IntEnum
from typing import List, Optional, Tuple
import logging

from assignment_core.errors import InvariantViolation
from assignment_core.labeling import Labeling
from assignment_core.location import INVALID_LOCATION, Location
from assignment_core.models import SolveStats
from assignment_core.reduced_cost import ReducedCost, ZeroIndex

logger = logging.getLogger(__name__)


class Step(IntEnum):
    COVER = 3
    PRIME = 4
    AUGMENT = 5
    ADJUST = 6
    DONE = 7


class StepMachine:
    def __init__(
        self,
        reduced: ReducedCost,
        zeros: Optional[ZeroIndex] = None,
        labeling: Optional[Labeling] = None,
        check_invariants: bool = False,
    ):
        n, m = reduced.shape
        self.reduced = reduced
        self.zeros = zeros
        self.labeling = labeling if labeling is not None else Labeling(n, m)
        self.check_invariants = check_invariants
        self.step = Step.COVER
        self.path_start = INVALID_LOCATION
        self.stats = SolveStats()

    @property
    def shape(self) -> Tuple[int, int]:
        return self.reduced.shape

    def solve(self) -> SolveStats:
        self.reduce_rows()
        self.star_initial_zeros()
        return self.run()

    # --- steps 1 and 2 -----------------------------------------------------

    def reduce_rows(self) -> None:
        self.reduced.initialize_row_offsets()
        self.zeros = ZeroIndex.build(self.reduced)
        logger.debug("row reduction left %d zeros", len(self.zeros))

    def star_initial_zeros(self) -> None:
        lab = self.labeling
        n, _ = self.shape
        for i in range(n):
            for j in self.zeros.columns(i):
                if not lab.row_cover[i] and not lab.col_cover[j]:
                    lab.star(i, j)
                    lab.row_cover[i] = True
                    lab.col_cover[j] = True
        lab.clear_covers()
        logger.debug("initial starring matched %d rows", lab.star_count())

    # --- loop --------------------------------------------------------------

    def run(self) -> SolveStats:
        if self.zeros is None:
            raise InvariantViolation("step machine started before row reduction")
        while True:
            step = self.step
            if step == Step.COVER:
                self.step = self.cover_starred_columns()
            elif step == Step.PRIME:
                self.step, self.path_start = self.prime_zeros()
            elif step == Step.AUGMENT:
                self.step = self.augment(self.path_start)
                self.path_start = INVALID_LOCATION
            elif step == Step.ADJUST:
                self.step = self.adjust()
            elif step == Step.DONE:
                break
            else:
                raise InvariantViolation(f"step machine reached undefined step {step!r}")
            self.stats.transitions += 1
            logger.debug("step %d -> %d", int(step), int(self.step))
        return self.stats

    def cover_starred_columns(self) -> Step:
        lab = self.labeling
        if self.check_invariants:
            lab.check()
        covered = lab.cover_starred_columns()
        if covered >= min(self.shape):
            return Step.DONE
        return Step.PRIME

    def prime_zeros(self) -> Tuple[Step, Location]:
        """
        Prime uncovered zeros, row by row.

        A primed zero in a row with a star covers that row and uncovers the
        star's column, then the scan carries on at the next row. Uncovering a
        column can expose zeros in rows already passed, so the scan repeats
        until a full pass primes nothing.
        """
        lab = self.labeling
        n, _ = self.shape
        progress = True
        while progress:
            progress = False
            for i in range(n):
                if lab.row_cover[i]:
                    continue
                j = self.zeros.first_uncovered(i, lab.col_cover)
                if j is None:
                    continue
                lab.prime(i, j)
                self.stats.primes += 1
                star_col = lab.star_in_row(i)
                if star_col is None:
                    return Step.AUGMENT, Location(i, j)
                lab.row_cover[i] = True
                lab.col_cover[star_col] = False
                progress = True
        return Step.ADJUST, INVALID_LOCATION

    def augment(self, start: Location) -> Step:
        lab = self.labeling
        if not start.valid or not lab.is_primed(start.row, start.col):
            raise InvariantViolation(f"augmenting path started from {start}")

        path: List[Location] = [start]
        while True:
            col = path[-1].col
            row = lab.star_in_column(col)
            if row is None:
                break
            path.append(Location(row, col))
            prime_col = lab.prime_in_row(row)
            if prime_col is None:
                raise InvariantViolation(f"starred zero at ({row}, {col}) has no primed partner")
            path.append(Location(row, prime_col))

        for loc in path:
            if lab.is_starred(loc.row, loc.col):
                lab.unmark(loc.row, loc.col)
            else:
                lab.star(loc.row, loc.col)
        lab.erase_primes()
        lab.clear_covers()
        self.stats.augmentations += 1
        logger.debug("augmented along a path of %d cells", len(path))
        return Step.COVER

    def adjust(self) -> Step:
        lab = self.labeling
        min_value, cells = self.reduced.uncovered_minimum(lab.row_cover, lab.col_cover)
        if min_value is None:
            raise InvariantViolation("no uncovered cells left to adjust")
        self.reduced.reduce_by_global_minimum(min_value, lab.row_cover, lab.col_cover)
        self.zeros.patch(cells, lab.row_cover, lab.col_cover, min_value)
        self.stats.adjustments += 1
        logger.debug("adjusted offsets by %r, %d new zeros", min_value, len(cells))
        return Step.PRIME
