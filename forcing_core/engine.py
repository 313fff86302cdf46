# FILE: forcing_core/engine.py
from __future__ import annotations
import logging
from typing import Optional, Tuple
import numpy as np

from .constants import DEFAULT_CELL_WIDTH
from .constraints import check_target, clamp_variance, clamp_cell_value
from .edits import resolve_edit
from .grid import build_grid
from .models import AppConfig, EditSet, Grid, MatrixState
from .seeds import solve_seeds
from .validation import validate, validation_message

logger = logging.getLogger(__name__)


def generate(target: int, variance: float, rng: Optional[np.random.Generator] = None) -> Grid:
    target = check_target(target)
    return build_grid(solve_seeds(target, clamp_variance(variance), rng))


def reset(target: int, variance: float, rng: Optional[np.random.Generator] = None) -> Grid:
    """Same as generate; the caller drops its edit set."""
    return generate(target, variance, rng)


def evaluate(grid: Grid, target: int) -> Tuple[bool, str]:
    return validate(grid, target), validation_message(grid, target)


def _state(grid: Grid, target: int, variance: float, edits: EditSet, cell_width: int) -> MatrixState:
    is_valid, message = evaluate(grid, target)
    return MatrixState(
        grid=grid, target=target, variance=variance, edits=edits, cell_width=cell_width,
        is_valid=is_valid, validation_message=message,
    )


def new_state(
    target: int,
    variance: float,
    rng: Optional[np.random.Generator] = None,
    cell_width: int = DEFAULT_CELL_WIDTH,
) -> MatrixState:
    variance = clamp_variance(variance)
    grid = generate(target, variance, rng)
    return _state(grid, int(target), variance, EditSet(), cell_width)


def start(config: AppConfig) -> MatrixState:
    rng = np.random.default_rng(config.random_seed)
    return new_state(config.default_target, config.default_variance, rng, config.cell_width)


def apply_edit(state: MatrixState, row: int, col: int, value: int) -> MatrixState:
    """
    Fold one user edit into the state. An edit to a different row of an
    already edited column is refused and the state comes back unchanged.
    """
    if not state.edits.accepts(row, col):
        logger.info("edit at (%d, %d) refused: column already edited", row, col)
        return state
    grid = resolve_edit(state.grid, state.target, row, col, value, state.edits)
    edits = state.edits.with_edit(row, col, clamp_cell_value(value))
    return _state(grid, state.target, state.variance, edits, state.cell_width)
