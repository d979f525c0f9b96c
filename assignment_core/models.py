# assignment_core/models.py
from __future__ import annotations
from typing import List
from pydantic import BaseModel, Field, field_validator


class SolverConfig(BaseModel):
    maximize: bool = False
    unassigned: int = -1
    check_invariants: bool = False

    @field_validator("unassigned")
    @classmethod
    def _negative(cls, v):
        if v >= 0:
            raise ValueError("unassigned must be negative so it never collides with a column index")
        return v


class SolveStats(BaseModel):
    transitions: int = 0
    primes: int = 0
    augmentations: int = 0
    adjustments: int = 0


class SolveResult(BaseModel):
    assignment: List[int]
    total_cost: float
    transposed: bool = False
    stats: SolveStats = Field(default_factory=SolveStats)
