# assignment_core/oracle.py
"""
Exhaustive reference solver for small matrices (self-test and test-suite).
"""
from __future__ import annotations
from itertools import permutations
from typing import List
import math
import numpy as np


def brute_force_assignment(cost_matrix) -> List[int]:
    """
    Try every injective row -> column map and keep the first cheapest one.

    Totals are summed with math.fsum so that near-ties are decided on the
    correctly rounded sum rather than on accumulated rounding error.
    """
    cost = np.asarray(cost_matrix)
    n, m = cost.shape
    if n > m:
        rows_for_col = brute_force_assignment(cost.T)
        out = [-1] * n
        for j, i in enumerate(rows_for_col):
            out[i] = j
        return out

    best_total = None
    best: List[int] = []
    for perm in permutations(range(m), n):
        total = math.fsum(float(cost[i, j]) for i, j in enumerate(perm))
        if best_total is None or total < best_total:
            best_total = total
            best = list(perm)
    return best
