# FILE: forcing_core/constants.py
from __future__ import annotations

# --- Grid shape (fixed 4x4) ---
GRID_SIZE = 4
SEED_COUNT = GRID_SIZE * 2

# --- Bounds enforced at the boundary ---
TARGET_MIN = 1
TARGET_MAX = 9_999_999
CELL_MIN = 1
CELL_MAX = 9_999_999

# Four cells of value >= 1 cannot sum below this.
POSITIVE_TARGET_MIN = GRID_SIZE * CELL_MIN

# --- Validator status ---
VALID_MESSAGE = "Valid matrix - all combinations sum to target"
INVALID_MESSAGE = "Invalid matrix - some combinations do not sum to target"

# --- Seed solver tuning ---
# Fraction of target/8 a seed may move at variance=1; grows with target magnitude.
MIN_SPREAD_FRACTION = 0.25
MAX_SPREAD_FRACTION = 0.85
SPREAD_MAGNITUDE_DIGITS = 7          # log10 at which the cap saturates
MAX_SPREAD_RATIO = 0.4               # (max cell - min cell) <= ratio * target
MAX_REPAIR_ROUNDS = 6
JITTER = 0.15

# Asymmetric seed shapes (shuffled per generation); not arithmetic progressions.
ROW_SHAPE = (-0.9, 0.35, -0.2, 0.75)
COL_SHAPE = (0.6, -0.7, 0.15, -0.1)

# --- Text rendering ---
DEFAULT_CELL_WIDTH = 4
SHARE_TITLE = "Forcing Matrix"
