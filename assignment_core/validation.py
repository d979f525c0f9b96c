# assignment_core/validation.py
from __future__ import annotations
from typing import Sequence
import numpy as np

from assignment_core.errors import InvalidInputError

_INT64_MAX = int(np.iinfo(np.int64).max)


def _fits_int64(cost: np.ndarray) -> bool:
    """
    Whether every value, its negation and the row/column offsets reached
    while solving stay representable in int64.
    """
    if cost.size == 0:
        return True
    lo, hi = int(cost.min()), int(cost.max())
    n, m = cost.shape
    bound = max(abs(lo), abs(hi)) + (hi - lo) * (n + m + 1)
    return bound <= _INT64_MAX


def validate_cost_matrix(cost_matrix) -> np.ndarray:
    """
    Return the cost matrix as a 2-D numpy array, rejecting anything the solver
    cannot work on.

    Floating dtypes are kept as they are so that reductions happen in the
    caller's precision. Integer and bool data widen to int64 when the offsets
    the solver builds on top of them stay inside int64, otherwise to float64.
    Anything else is converted to float64.
    """
    try:
        cost = np.asarray(cost_matrix)
    except ValueError as exc:
        raise InvalidInputError(f"Cost matrix is not rectangular: {exc}") from exc
    if cost.ndim != 2:
        raise InvalidInputError(f"Cost matrix must be 2-D, got {cost.ndim} dimension(s).")

    kind = cost.dtype.kind
    if kind == "c":
        raise InvalidInputError("Cost matrix must be real-valued.")
    if kind in "biu":
        cost = cost.astype(np.int64) if _fits_int64(cost) else cost.astype(np.float64)
    elif kind not in "if":
        try:
            cost = cost.astype(float)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Cost matrix must be numeric: {exc}") from exc

    if cost.dtype.kind == "f" and cost.size and not np.isfinite(cost).all():
        bad = np.argwhere(~np.isfinite(cost))[0]
        raise InvalidInputError(
            f"Cost matrix holds a non-finite value at ({bad[0]}, {bad[1]}): {cost[tuple(bad)]}"
        )
    return cost


def check_assignment(assignment: Sequence[int], n_rows: int, n_cols: int, unassigned: int = -1) -> bool:
    """Feasibility: one entry per row, every column in range and used at most once."""
    if len(assignment) != n_rows:
        return False
    used = [j for j in assignment if j != unassigned]
    if any(not (0 <= j < n_cols) for j in used):
        return False
    if len(used) != len(set(used)):
        return False
    return len(used) == min(n_rows, n_cols)


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from assignment_core.hungarian import solve, assignment_cost
    from assignment_core.oracle import brute_force_assignment

    matrix = [[1, 2, 3], [2, 4, 6], [3, 6, 9]]
    results["tests"].append(("Anti-diagonal scenario", solve(matrix) == [2, 1, 0]))

    matrix = [[4, 1, 3], [2, 0, 5], [3, 2, 2]]
    best = assignment_cost(matrix, brute_force_assignment(matrix))
    results["tests"].append(("Matches brute force", assignment_cost(matrix, solve(matrix)) == best))

    matrix = [[5, 1, 4, 2], [3, 6, 1, 7]]
    results["tests"].append(("Rectangular feasibility", check_assignment(solve(matrix), 2, 4)))

    tall = [[5, 3], [1, 4], [2, 2]]
    results["tests"].append(("Tall matrix feasibility", check_assignment(solve(tall), 3, 2)))

    try:
        solve([[1.0, float("nan")], [0.0, 1.0]])
        rejected = False
    except InvalidInputError:
        rejected = True
    results["tests"].append(("NaN rejected", rejected))
    return results
