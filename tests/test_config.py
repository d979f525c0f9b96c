import pytest
from assignment_core.config import DEFAULT_CONFIG, make_config
from assignment_core.errors import InvalidInputError
from assignment_core.hungarian import solve_detailed
from assignment_core.models import SolverConfig


def test_defaults():
    config = make_config()
    assert config == SolverConfig()
    assert config.model_dump() == DEFAULT_CONFIG


def test_overrides():
    config = make_config({"check_invariants": True})
    assert config.check_invariants
    assert config.unassigned == -1


def test_bad_override():
    with pytest.raises(InvalidInputError):
        make_config({"unassigned": 0})


def test_solver_uses_default_config():
    result = solve_detailed([[4.0], [2.0], [8.0]])
    assert result.assignment == [DEFAULT_CONFIG["unassigned"], 0, DEFAULT_CONFIG["unassigned"]]
