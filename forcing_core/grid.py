# FILE: forcing_core/grid.py
from __future__ import annotations
from typing import Dict, Optional
import numpy as np

from .constants import GRID_SIZE
from .models import Cell, Grid, SeedPair, EditSet


def seed_values(seeds: SeedPair) -> np.ndarray:
    """cell[r][c] = row[r] + col[c] as a 4x4 int array."""
    return np.add.outer(np.array(seeds.row, dtype=np.int64), np.array(seeds.col, dtype=np.int64))


def build_grid(seeds: SeedPair, edits: Optional[EditSet] = None) -> Grid:
    """
    Expand seeds into a grid. Cells at edited positions keep the user value and
    are flagged user-edited; every other cell is flagged calculated.
    """
    values = seed_values(seeds)
    user = edits.positions() if edits is not None else {}
    cells = []
    for r in range(GRID_SIZE):
        row = []
        for c in range(GRID_SIZE):
            if (r, c) in user:
                row.append(Cell(value=user[(r, c)], is_user_edited=True, is_calculated=False))
            else:
                row.append(Cell(value=int(values[r, c]), is_calculated=True))
        cells.append(row)
    return Grid(cells=cells)


def extract_seeds(grid: Grid) -> Optional[SeedPair]:
    """
    Decompose a grid into row/column seeds with row[0] = 0.
    Returns None when the grid is not of the row+column form.
    """
    v = grid.as_array()
    row = v[:, 0] - v[0, 0]
    col = v[0, :].copy()
    if not np.array_equal(np.add.outer(row, col), v):
        return None
    return SeedPair(row=row.tolist(), col=col.tolist())


def grid_stats(grid: Grid) -> Dict[str, object]:
    v = grid.as_array()
    uniq, counts = np.unique(v, return_counts=True)
    repeated = {int(val): int(n) for val, n in zip(uniq, counts) if n > 1}
    return {
        "min": int(v.min()),
        "max": int(v.max()),
        "spread": int(v.max() - v.min()),
        "unique": int(uniq.size),
        "repeated": repeated,
    }
