# FILE: forcing_core/io.py
from __future__ import annotations
from typing import List, Optional
import pandas as pd

from .constants import GRID_SIZE, DEFAULT_CELL_WIDTH, SHARE_TITLE
from .models import Grid, MatrixState
from .permutations import row_assignments, assignment_cells
from .validation import combination_sums


def cell_width(grid: Grid, width: Optional[int] = None) -> int:
    """Padding wide enough for the longest value, never below `width`."""
    longest = max(len(str(v)) for row in grid.values() for v in row)
    return max(width or DEFAULT_CELL_WIDTH, longest)


def grid_to_text(grid: Grid, width: Optional[int] = None) -> str:
    w = cell_width(grid, width)
    return "\n".join(
        " ".join(str(v).rjust(w) for v in row) for row in grid.values()
    )


def parse_grid_text(text: str) -> Grid:
    lines = [ln for ln in text.strip().splitlines() if ln.strip()]
    if len(lines) != GRID_SIZE:
        raise ValueError(f"Expected {GRID_SIZE} rows, got {len(lines)}")
    values: List[List[int]] = []
    for i, ln in enumerate(lines, start=1):
        parts = ln.split()
        if len(parts) != GRID_SIZE:
            raise ValueError(f"Row {i}: expected {GRID_SIZE} values, got {len(parts)}")
        try:
            values.append([int(p) for p in parts])
        except ValueError as e:
            raise ValueError(f"Row {i}: non-integer value ({e})") from e
    return Grid.from_values(values)


def share_text(grid: Grid, target: int, width: Optional[int] = None) -> str:
    """Text handed to a clipboard or share sink."""
    return f"{SHARE_TITLE} (Target: {target}):\n\n{grid_to_text(grid, width)}"


def grid_to_df(grid: Grid) -> pd.DataFrame:
    cols = [f"Col {c + 1}" for c in range(GRID_SIZE)]
    idx = [f"Row {r + 1}" for r in range(GRID_SIZE)]
    return pd.DataFrame(grid.values(), index=idx, columns=cols)


def combinations_df(grid: Grid, target: int) -> pd.DataFrame:
    """One line per row-assignment: picked row per column, the sum, and a match flag."""
    sums = combination_sums(grid)
    rows = []
    for assignment, total in zip(row_assignments(), sums):
        entry = {f"col_{c + 1}_row": r + 1 for r, c in assignment_cells(assignment)}
        entry["sum"] = int(total)
        entry["matches_target"] = int(total) == target
        rows.append(entry)
    return pd.DataFrame(rows)


def state_text(state: MatrixState) -> str:
    return grid_to_text(state.grid, state.cell_width)


def state_share_text(state: MatrixState) -> str:
    return share_text(state.grid, state.target, state.cell_width)
