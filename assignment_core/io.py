# assignment_core/io.py
from __future__ import annotations
import io
from typing import Sequence
import numpy as np
import pandas as pd
import yaml

from assignment_core.config import make_config
from assignment_core.errors import InvalidInputError
from assignment_core.models import SolverConfig

ASSIGNMENT_COLUMNS = ["worker", "job", "cost"]


def load_cost_matrix_csv(file_like, index_col: int | None = 0) -> pd.DataFrame:
    """
    Read a labelled cost matrix: one row per worker, one column per job.

    Cells that do not parse as numbers become NaN and are rejected later by
    ``validate_cost_matrix``.
    """
    df = pd.read_csv(file_like, index_col=index_col)
    if df.empty:
        raise InvalidInputError("Cost matrix CSV has no rows or no job columns.")
    df = df.apply(pd.to_numeric, errors="coerce")
    df.columns = [str(c) for c in df.columns]
    df.index = [str(i) for i in df.index]
    return df


def assignment_frame(cost_df: pd.DataFrame, assignment: Sequence[int], unassigned: int = -1) -> pd.DataFrame:
    """One line per worker with the job it got and what it costs."""
    values = cost_df.to_numpy()
    rows = []
    for i, worker in enumerate(cost_df.index):
        j = assignment[i]
        if j == unassigned:
            rows.append({"worker": worker, "job": "", "cost": np.nan})
        else:
            rows.append({"worker": worker, "job": cost_df.columns[j], "cost": values[i, j]})
    return pd.DataFrame(rows, columns=ASSIGNMENT_COLUMNS)


def save_assignment_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def load_config_yaml(path: str) -> SolverConfig:
    with open(path, "r", encoding="utf-8") as f:
        obj = yaml.safe_load(f) or {}
    if not isinstance(obj, dict):
        raise InvalidInputError(f"Config file {path} must hold a mapping.")
    return make_config(obj)
