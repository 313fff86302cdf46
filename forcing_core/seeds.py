# FILE: forcing_core/seeds.py
"""
Seed solver: 4 row seeds + 4 column seeds whose total is the target.

- variance=0 -> even split (all 16 cells within 1 of each other)
- variance>0 -> shuffled asymmetric offsets + jitter, scaled by a spread
  cap that grows with target magnitude, then re-balanced to the exact total
- repairs: uniform shift absorbed by the last column seed, then halving the
  offsets, then falling back to the even split
"""
from __future__ import annotations
import logging
import math
from typing import List, Optional
import numpy as np

from .constants import (
    SEED_COUNT, GRID_SIZE, CELL_MIN, POSITIVE_TARGET_MIN,
    MIN_SPREAD_FRACTION, MAX_SPREAD_FRACTION, SPREAD_MAGNITUDE_DIGITS,
    MAX_SPREAD_RATIO, MAX_REPAIR_ROUNDS, JITTER, ROW_SHAPE, COL_SHAPE,
)
from .constraints import clamp_variance
from .distribution import split_evenly, spread_over
from .models import SeedPair

logger = logging.getLogger(__name__)


def cell_floor(target: int) -> int:
    """Smallest cell value the solver guarantees for this target."""
    return CELL_MIN if target >= POSITIVE_TARGET_MIN else 0


def spread_cap_fraction(target: int) -> float:
    if target <= 1:
        return MIN_SPREAD_FRACTION
    scale = min(1.0, math.log10(target) / SPREAD_MAGNITUDE_DIGITS)
    return MIN_SPREAD_FRACTION + (MAX_SPREAD_FRACTION - MIN_SPREAD_FRACTION) * scale


def minimal_seeds(target: int) -> SeedPair:
    return SeedPair.from_flat(split_evenly(target, SEED_COUNT))


def _min_cell(seeds: List[int]) -> int:
    return min(seeds[:GRID_SIZE]) + min(seeds[GRID_SIZE:])


def _cell_spread(seeds: List[int]) -> int:
    rows, cols = seeds[:GRID_SIZE], seeds[GRID_SIZE:]
    return (max(rows) - min(rows)) + (max(cols) - min(cols))


def _acceptable(seeds: List[int], target: int, floor: int) -> bool:
    return _min_cell(seeds) >= floor and _cell_spread(seeds) <= MAX_SPREAD_RATIO * target


def _organic_offsets(spread: int, rng: np.random.Generator) -> List[int]:
    shape = np.concatenate([rng.permutation(ROW_SHAPE), rng.permutation(COL_SHAPE)])
    shape = shape + rng.uniform(-JITTER, JITTER, SEED_COUNT)
    return [int(round(x)) for x in shape * spread]


def _rebalance(seeds: List[int], target: int) -> List[int]:
    return spread_over(seeds, target - sum(seeds), range(SEED_COUNT))


def _shift_up(seeds: List[int], floor: int) -> List[int]:
    # every cell gains 2*shift; the last column seed pays for all 8 shifts
    shift = -(-(floor - _min_cell(seeds)) // 2)
    out = [s + shift for s in seeds]
    out[-1] -= shift * SEED_COUNT
    return out


def solve_seeds(target: int, variance: float, rng: Optional[np.random.Generator] = None) -> SeedPair:
    variance = clamp_variance(variance)
    minimal = split_evenly(target, SEED_COUNT)
    base = target // SEED_COUNT
    spread = int(round(base * spread_cap_fraction(target) * variance))
    if spread == 0:
        return SeedPair.from_flat(minimal)

    rng = rng if rng is not None else np.random.default_rng()
    floor = cell_floor(target)
    offsets = _organic_offsets(spread, rng)

    for attempt in range(MAX_REPAIR_ROUNDS):
        seeds = _rebalance([m + o for m, o in zip(minimal, offsets)], target)
        if _acceptable(seeds, target, floor):
            return SeedPair.from_flat(seeds)
        if _min_cell(seeds) < floor:
            shifted = _shift_up(seeds, floor)
            if _acceptable(shifted, target, floor):
                logger.debug("target=%d: shifted seeds up on attempt %d", target, attempt)
                return SeedPair.from_flat(shifted)
        logger.debug(
            "target=%d: min cell %d, spread %d rejected; halving offsets",
            target, _min_cell(seeds), _cell_spread(seeds),
        )
        offsets = [int(o / 2) for o in offsets]

    logger.info("target=%d variance=%.2f: falling back to minimal seeds", target, variance)
    return SeedPair.from_flat(minimal)
