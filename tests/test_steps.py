import numpy as np
import pytest
from assignment_core.errors import InvariantViolation
from assignment_core.location import INVALID_LOCATION, Location
from assignment_core.reduced_cost import ReducedCost
from assignment_core.steps import Step, StepMachine


def _machine(cost, **kw):
    return StepMachine(ReducedCost(np.asarray(cost)), **kw)


def test_walk_through_each_step():
    machine = _machine([[1, 1], [2, 3]])
    machine.reduce_rows()
    assert machine.zeros.columns(0) == [0, 1]
    assert machine.zeros.columns(1) == [0]

    machine.star_initial_zeros()
    lab = machine.labeling
    assert lab.starred_columns() == [0, None]
    assert not lab.row_cover.any() and not lab.col_cover.any()

    assert machine.cover_starred_columns() == Step.PRIME
    step, start = machine.prime_zeros()
    assert step == Step.AUGMENT
    assert start == Location(1, 0)
    assert lab.is_primed(0, 1)
    assert lab.row_cover.tolist() == [True, False]

    assert machine.augment(start) == Step.COVER
    assert lab.starred_columns() == [1, 0]
    assert lab.prime_in_row(0) is None
    assert not lab.row_cover.any() and not lab.col_cover.any()
    assert machine.cover_starred_columns() == Step.DONE


def test_adjust_creates_zero_and_returns_to_prime():
    machine = _machine([[1, 2], [1, 3]])
    machine.reduce_rows()
    machine.star_initial_zeros()
    assert machine.cover_starred_columns() == Step.PRIME
    assert machine.prime_zeros() == (Step.ADJUST, INVALID_LOCATION)
    assert machine.adjust() == Step.PRIME
    assert machine.zeros.columns(0) == [0, 1]
    assert machine.stats.adjustments == 1


@pytest.mark.parametrize("seed", range(8))
def test_zero_index_tracks_offsets_exactly(seed):
    rng = np.random.default_rng(seed)
    n, m = rng.integers(2, 8, size=2)
    cost = rng.integers(-10, 10, size=(min(n, m), max(n, m)))
    machine = _machine(cost, check_invariants=True)
    machine.solve()

    rc = machine.reduced
    eff = rc.block(np.arange(cost.shape[0]), np.arange(cost.shape[1]))
    assert (eff >= 0).all()
    recorded = {(i, j) for i in range(cost.shape[0]) for j in machine.zeros.columns(i)}
    actual = {(int(i), int(j)) for i, j in np.argwhere(eff == 0)}
    assert recorded == actual
    for i, j in enumerate(machine.labeling.starred_columns()):
        assert eff[i, j] == 0


def test_undefined_step_aborts():
    machine = _machine([[1, 2], [3, 4]])
    machine.reduce_rows()
    machine.star_initial_zeros()
    machine.step = 9
    with pytest.raises(InvariantViolation):
        machine.run()


def test_run_requires_row_reduction():
    with pytest.raises(InvariantViolation):
        _machine([[1]]).run()


def test_augment_needs_a_valid_start():
    machine = _machine([[1, 2], [3, 4]])
    machine.reduce_rows()
    with pytest.raises(InvariantViolation):
        machine.augment(INVALID_LOCATION)
    with pytest.raises(InvariantViolation):
        machine.augment(Location(0, 0))  # not primed
