# FILE: forcing_core/edits.py
"""
Edit resolver.

Fewer than 4 edited columns leave the seed system underdetermined: only the
edited cell changes and the grid is reported invalid until the user finishes.
Once every column carries an edit the seeds are re-solved:

  1. col[0] = 0
  2. row[edited row of col 0] = its value
  3. col[c] = value[c] - row[edited row of c] for c = 1..3
  4. rows carrying no edit start at 0
  5. target - sum(seeds) is split evenly over those free rows, so the
     edited cells keep their exact values
  6. the grid is rebuilt from the seeds
"""
from __future__ import annotations
import logging

from .constants import GRID_SIZE, CELL_MIN
from .constraints import clamp_cell_value, check_position
from .distribution import spread_over
from .grid import build_grid
from .models import Cell, Grid, SeedPair, EditSet

logger = logging.getLogger(__name__)


def apply_cell_edit(grid: Grid, row: int, col: int, value: int) -> Grid:
    out = grid.copy()
    out.cells[row][col] = Cell(value=value, is_user_edited=True, is_calculated=False)
    return out


def resolve_seeds(edits: EditSet, target: int) -> SeedPair:
    if not edits.is_complete:
        raise ValueError(f"Need an edit in every column, got {len(edits)}")
    row = [0] * GRID_SIZE
    col = [0] * GRID_SIZE

    anchor = edits.edits[0]
    row[anchor.row] = anchor.value
    for c in range(1, GRID_SIZE):
        e = edits.edits[c]
        col[c] = e.value - row[e.row]

    edited_rows = {e.row for e in edits.edits.values()}
    free_rows = [r for r in range(GRID_SIZE) if r not in edited_rows]
    deficit = target - (sum(row) + sum(col))
    if deficit and free_rows:
        row = spread_over(row, deficit, free_rows)
        logger.debug("spread deficit %d over free rows %s", deficit, free_rows)
    elif deficit:
        # edits cover every row: their sum is already fixed by the user
        logger.warning(
            "edits sum to %d, not target %d; grid cannot force the target",
            target - deficit, target,
        )
    lowest = min(row) + min(col)
    if lowest < CELL_MIN:
        logger.warning("resolved grid has cells down to %d (below %d)", lowest, CELL_MIN)
    return SeedPair(row=row, col=col)


def resolve_edit(
    grid: Grid,
    target: int,
    edited_row: int,
    edited_col: int,
    new_value: int,
    edit_set: EditSet,
) -> Grid:
    """
    Apply one user edit on top of `edit_set` (the edits made so far).

    Raises EditConflictError when the column is already edited at another row.
    """
    check_position(edited_row, edited_col)
    value = clamp_cell_value(new_value)
    edits = edit_set.with_edit(edited_row, edited_col, value)
    if not edits.is_complete:
        return apply_cell_edit(grid, edited_row, edited_col, value)
    return build_grid(resolve_seeds(edits, target), edits)
