# assignment_core/hungarian.py
"""
Munkres / Hungarian solver for rectangular cost matrices.

- Minimizes total cost (or maximizes it with ``maximize=True``).
- Works on the transpose when there are more rows than columns; the answer
  is always indexed by the caller's rows.
- Returns a list 'assign' where assign[row] = col index chosen for that row,
  or the unassigned sentinel (-1) for rows left over when rows > columns.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Sequence
import logging
import math
import numpy as np

from assignment_core.config import make_config
from assignment_core.errors import InvariantViolation
from assignment_core.models import SolveResult, SolverConfig
from assignment_core.reduced_cost import ReducedCost
from assignment_core.steps import StepMachine
from assignment_core.validation import validate_cost_matrix

logger = logging.getLogger(__name__)


def make_cost_matrix(profit_matrix, inversion: Optional[Callable] = None) -> np.ndarray:
    """
    Turn a profit matrix into a cost matrix.

    Without an ``inversion`` function every entry becomes ``max - profit``;
    otherwise ``inversion`` is applied to each entry.
    """
    profit = validate_cost_matrix(profit_matrix)
    if profit.size == 0:
        return profit.copy()
    if inversion is None:
        return profit.max() - profit
    return validate_cost_matrix([[inversion(value) for value in row] for row in profit.tolist()])


def assignment_cost(cost_matrix, assignment: Sequence[int], unassigned: int = -1) -> float:
    cost = np.asarray(cost_matrix)
    return math.fsum(float(cost[i, j]) for i, j in enumerate(assignment) if j != unassigned)


def _starred_assignment(machine: StepMachine, n: int, transposed: bool, unassigned: int) -> List[int]:
    starred = machine.labeling.starred_columns()
    if any(j is None for j in starred):
        raise InvariantViolation("step machine finished with an unmatched working row")
    assign = [unassigned] * n
    if transposed:
        for j, i in enumerate(starred):
            assign[i] = j
    else:
        assign[:] = starred
    return assign


def solve_detailed(
    cost_matrix,
    *,
    maximize: Optional[bool] = None,
    config: Optional[SolverConfig] = None,
) -> SolveResult:
    config = config or make_config()
    if maximize is None:
        maximize = config.maximize

    cost = validate_cost_matrix(cost_matrix)
    n, m = cost.shape
    if cost.size == 0:
        return SolveResult(assignment=[config.unassigned] * n, total_cost=0.0)

    work = -cost if maximize else cost
    transposed = n > m
    if transposed:
        work = work.T

    machine = StepMachine(ReducedCost(work), check_invariants=config.check_invariants)
    stats = machine.solve()
    assign = _starred_assignment(machine, n, transposed, config.unassigned)
    total = assignment_cost(cost, assign, config.unassigned)
    logger.debug(
        "solved %dx%d (transposed=%s): %d augmentations, %d adjustments, total %r",
        n, m, transposed, stats.augmentations, stats.adjustments, total,
    )
    return SolveResult(assignment=assign, total_cost=total, transposed=transposed, stats=stats)


def solve(
    cost_matrix,
    *,
    maximize: Optional[bool] = None,
    config: Optional[SolverConfig] = None,
) -> List[int]:
    return solve_detailed(cost_matrix, maximize=maximize, config=config).assignment
