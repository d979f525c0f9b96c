import io
import numpy as np
import pytest
from assignment_core.errors import InvalidInputError
from assignment_core.hungarian import solve
from assignment_core.io import (
    load_cost_matrix_csv, assignment_frame, save_assignment_csv_bytes, load_config_yaml,
)

CSV = """worker,J1,J2,J3
alice,4,1,3
bob,2,0,5
carol,3,2,2
"""


def test_load_and_report_assignment():
    df = load_cost_matrix_csv(io.StringIO(CSV))
    assert list(df.index) == ["alice", "bob", "carol"]
    assert list(df.columns) == ["J1", "J2", "J3"]

    assignment = solve(df)
    assert assignment == [1, 0, 2]

    report = assignment_frame(df, assignment)
    assert report["job"].tolist() == ["J2", "J1", "J3"]
    assert report["cost"].tolist() == [1, 2, 2]
    assert save_assignment_csv_bytes(report).startswith(b"worker,job,cost")


def test_unassigned_rows_are_blank():
    df = load_cost_matrix_csv(io.StringIO("worker,J1\na,5\nb,1\n"))
    report = assignment_frame(df, solve(df))
    assert report["job"].tolist() == ["", "J1"]
    assert np.isnan(report["cost"].iloc[0])


def test_non_numeric_cell_is_rejected():
    df = load_cost_matrix_csv(io.StringIO("worker,J1,J2\na,1,x\nb,2,3\n"))
    with pytest.raises(InvalidInputError):
        solve(df)


def test_load_config_yaml(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("maximize: true\nunassigned: -5\n", encoding="utf-8")
    config = load_config_yaml(str(path))
    assert config.maximize
    assert config.unassigned == -5
    assert not config.check_invariants


def test_load_config_yaml_rejects_bad_values(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("unassigned: 3\n", encoding="utf-8")
    with pytest.raises(InvalidInputError):
        load_config_yaml(str(path))
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(InvalidInputError):
        load_config_yaml(str(path))
