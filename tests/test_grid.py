# FILE: tests/test_grid.py
from forcing_core.grid import build_grid, extract_seeds, grid_stats
from forcing_core.models import SeedPair, EditSet, Grid

def test_build_grid_sums_seeds():
    seeds = SeedPair(row=[1, 2, 3, 4], col=[10, 20, 30, 40])
    grid = build_grid(seeds)
    assert grid.cell(2, 1).value == 23
    assert grid.cell(0, 0).value == 11
    assert all(c.is_calculated and not c.is_user_edited for row in grid.cells for c in row)

def test_build_grid_flags_edited_cells():
    seeds = SeedPair(row=[1, 2, 3, 4], col=[10, 20, 30, 40])
    edits = EditSet().with_edit(1, 2, 32)
    grid = build_grid(seeds, edits)
    cell = grid.cell(1, 2)
    assert cell.value == 32 and cell.is_user_edited and not cell.is_calculated

def test_extract_seeds_recovers_decomposition():
    grid = build_grid(SeedPair(row=[1, 2, 3, 4], col=[10, 20, 30, 40]))
    seeds = extract_seeds(grid)
    assert seeds.row == [0, 1, 2, 3]
    assert seeds.col == [11, 21, 31, 41]
    assert seeds.total == 110
    assert build_grid(seeds).values() == grid.values()

def test_extract_seeds_rejects_non_additive_grid():
    grid = Grid.from_values([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 99]])
    assert extract_seeds(grid) is None

def test_grid_stats():
    grid = build_grid(SeedPair(row=[0, 1, 2, 3], col=[5, 5, 6, 7]))
    stats = grid_stats(grid)
    assert stats["min"] == 5
    assert stats["max"] == 10
    assert stats["spread"] == 5
    assert stats["repeated"][5] == 2
