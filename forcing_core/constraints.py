# FILE: forcing_core/constraints.py
from __future__ import annotations
import math
import numbers

from .constants import GRID_SIZE, TARGET_MIN, TARGET_MAX, CELL_MIN, CELL_MAX


def check_target(target) -> int:
    """Reject targets outside [TARGET_MIN, TARGET_MAX]; returns the int value."""
    if (
        isinstance(target, bool)
        or not isinstance(target, numbers.Real)
        or not math.isfinite(target)
        or int(target) != target
    ):
        raise ValueError(f"Target must be a whole number, got {target!r}")
    target = int(target)
    if not TARGET_MIN <= target <= TARGET_MAX:
        raise ValueError(f"Target {target} outside [{TARGET_MIN}, {TARGET_MAX}]")
    return target


def clamp_variance(variance: float) -> float:
    v = float(variance)
    if math.isnan(v):
        return 0.0
    return min(1.0, max(0.0, v))


def clamp_cell_value(value) -> int:
    return min(CELL_MAX, max(CELL_MIN, int(value)))


def check_position(row: int, col: int) -> None:
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise ValueError(f"Cell ({row}, {col}) outside the {GRID_SIZE}x{GRID_SIZE} grid")
