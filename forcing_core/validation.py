# FILE: forcing_core/validation.py
from __future__ import annotations
from typing import Dict, List, Tuple
import numpy as np

from .constants import GRID_SIZE, VALID_MESSAGE, INVALID_MESSAGE
from .grid import extract_seeds
from .models import Grid
from .permutations import assignment_array, row_assignments


def combination_sums(grid: Grid) -> np.ndarray:
    """Sum of the 4 picked cells for each of the 24 row-assignments."""
    values = grid.as_array()
    return values[assignment_array(), np.arange(GRID_SIZE)].sum(axis=1)


def validate(grid: Grid, target: int) -> bool:
    return bool(np.all(combination_sums(grid) == target))


def validation_message(grid: Grid, target: int) -> str:
    return VALID_MESSAGE if validate(grid, target) else INVALID_MESSAGE


def failing_combinations(grid: Grid, target: int) -> List[Tuple[Tuple[int, ...], int]]:
    sums = combination_sums(grid)
    return [
        (assignment, int(total))
        for assignment, total in zip(row_assignments(), sums)
        if total != target
    ]


def check_grid(grid: Grid, target: int) -> Dict[str, object]:
    """Validity plus diagnostics: failing combinations and seed decomposition."""
    failing = failing_combinations(grid, target)
    seeds = extract_seeds(grid)
    return {
        "valid": not failing,
        "message": INVALID_MESSAGE if failing else VALID_MESSAGE,
        "failing": failing,
        "decomposable": seeds is not None,
        "seed_total": seeds.total if seeds is not None else None,
    }


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from forcing_core.distribution import split_evenly, check_evenness
    shares = split_evenly(100, 8)
    results["tests"].append(("Shares sum to 100", sum(shares) == 100))
    results["tests"].append(("Evenness check", check_evenness(shares)))
    results["tests"].append(("24 row-assignments", len(set(row_assignments())) == 24))
    from forcing_core.seeds import solve_seeds
    from forcing_core.grid import build_grid
    seeds = solve_seeds(9999999, 1.0, np.random.default_rng(0))
    results["tests"].append(("Seeds total target", seeds.total == 9999999))
    results["tests"].append(("Generated grid forces target", validate(build_grid(seeds), 9999999)))
    return results
