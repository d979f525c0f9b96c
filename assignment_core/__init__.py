"""
assignment_core package: Munkres solver for the optimal assignment problem,
with its reduced-cost, labeling and step-machine building blocks.
"""
from assignment_core.errors import AssignmentError, InvalidInputError, InvariantViolation
from assignment_core.hungarian import assignment_cost, make_cost_matrix, solve, solve_detailed
from assignment_core.models import SolveResult, SolverConfig

__all__ = [
    "AssignmentError",
    "InvalidInputError",
    "InvariantViolation",
    "SolveResult",
    "SolverConfig",
    "assignment_cost",
    "make_cost_matrix",
    "solve",
    "solve_detailed",
]
