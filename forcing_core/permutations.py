# FILE: forcing_core/permutations.py
"""
Row-assignments for a 4x4 grid.

A row-assignment picks one cell per column: assignment[col] = row, with no
row used twice. There are 4! = 24 of them and the validator checks every one.
"""
from __future__ import annotations
from functools import lru_cache
from itertools import permutations
from typing import List, Tuple
import numpy as np

from .constants import GRID_SIZE


@lru_cache(maxsize=1)
def row_assignments() -> Tuple[Tuple[int, ...], ...]:
    return tuple(permutations(range(GRID_SIZE)))


def assignment_array() -> np.ndarray:
    """(24, 4) int array; row i is the i-th assignment."""
    return np.array(row_assignments(), dtype=np.intp)


def assignment_cells(assignment: Tuple[int, ...]) -> List[Tuple[int, int]]:
    return [(row, col) for col, row in enumerate(assignment)]
