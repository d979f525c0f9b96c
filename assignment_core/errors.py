# assignment_core/errors.py
from __future__ import annotations


class AssignmentError(Exception):
    """Base class for errors raised by the solver."""


class InvalidInputError(AssignmentError, ValueError):
    """The cost matrix (or a config value) cannot be solved as given."""


class InvariantViolation(AssignmentError, RuntimeError):
    """The step machine reached a state that should be impossible."""
