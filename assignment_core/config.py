# assignment_core/config.py
from __future__ import annotations
from pydantic import ValidationError

from assignment_core.errors import InvalidInputError
from assignment_core.models import SolverConfig

# ===== Solver defaults =====
DEFAULT_CONFIG = {
    "maximize": False,
    "unassigned": -1,             # Value for rows left over when rows > columns
    "check_invariants": False,    # Re-check the one-star-per-line rule every cover step
}


def make_config(overrides: dict | None = None) -> SolverConfig:
    """Defaults merged with ``overrides``, validated."""
    values = dict(DEFAULT_CONFIG)
    values.update(overrides or {})
    try:
        return SolverConfig(**values)
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid solver config: {exc}") from exc
