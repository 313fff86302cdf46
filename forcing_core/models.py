# forcing_core/models.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import numpy as np
from pydantic import BaseModel, Field, field_validator

from .constants import (
    GRID_SIZE, TARGET_MIN, TARGET_MAX, DEFAULT_CELL_WIDTH, INVALID_MESSAGE,
)


class EditConflictError(ValueError):
    """A second edit aimed at a different row of an already edited column."""


class Cell(BaseModel):
    value: int
    is_user_edited: bool = False
    is_calculated: bool = False


class Grid(BaseModel):
    cells: List[List[Cell]]

    @field_validator("cells")
    @classmethod
    def _four_by_four(cls, v):
        if len(v) != GRID_SIZE or any(len(row) != GRID_SIZE for row in v):
            raise ValueError(f"grid must be {GRID_SIZE}x{GRID_SIZE}")
        return v

    @classmethod
    def from_values(cls, values: List[List[int]]) -> "Grid":
        return cls(cells=[[Cell(value=int(v)) for v in row] for row in values])

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def values(self) -> List[List[int]]:
        return [[c.value for c in row] for row in self.cells]

    def as_array(self) -> np.ndarray:
        return np.array(self.values(), dtype=np.int64)

    def copy(self) -> "Grid":
        return self.model_copy(deep=True)


class SeedPair(BaseModel):
    row: List[int]
    col: List[int]

    @field_validator("row", "col")
    @classmethod
    def _four_seeds(cls, v):
        if len(v) != GRID_SIZE:
            raise ValueError(f"expected {GRID_SIZE} seeds, got {len(v)}")
        return [int(x) for x in v]

    @property
    def total(self) -> int:
        return sum(self.row) + sum(self.col)

    def flat(self) -> List[int]:
        return self.row + self.col

    @classmethod
    def from_flat(cls, seeds: List[int]) -> "SeedPair":
        return cls(row=list(seeds[:GRID_SIZE]), col=list(seeds[GRID_SIZE:]))


class CellEdit(BaseModel):
    row: int
    value: int


class EditSet(BaseModel):
    """User edits keyed by column; at most one (row, value) per column."""
    edits: Dict[int, CellEdit] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.edits)

    def __contains__(self, col: int) -> bool:
        return col in self.edits

    @property
    def is_complete(self) -> bool:
        return len(self.edits) == GRID_SIZE

    def accepts(self, row: int, col: int) -> bool:
        """First edit wins per column unless the new edit targets the same row."""
        prior = self.edits.get(col)
        return prior is None or prior.row == row

    def with_edit(self, row: int, col: int, value: int) -> "EditSet":
        if not self.accepts(row, col):
            raise EditConflictError(
                f"Column {col} already edited at row {self.edits[col].row}; "
                f"edit at row {row} rejected."
            )
        edits = dict(self.edits)
        edits[col] = CellEdit(row=row, value=value)
        return EditSet(edits=edits)

    def positions(self) -> Dict[Tuple[int, int], int]:
        return {(e.row, col): e.value for col, e in self.edits.items()}


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_target: int = 100
    default_variance: float = 0.5
    cell_width: int = DEFAULT_CELL_WIDTH
    random_seed: Optional[int] = None

    @field_validator("default_target")
    @classmethod
    def _target_in_range(cls, v):
        if not TARGET_MIN <= v <= TARGET_MAX:
            raise ValueError(f"default_target must be within [{TARGET_MIN}, {TARGET_MAX}]")
        return v

    @field_validator("default_variance")
    @classmethod
    def _variance_in_range(cls, v):
        if not 0.0 <= v <= 1.0:
            raise ValueError("default_variance must be within [0, 1]")
        return v

    @field_validator("cell_width")
    @classmethod
    def _positive_width(cls, v):
        if v < 1:
            raise ValueError("cell_width must be positive")
        return v


class MatrixState(BaseModel):
    grid: Grid
    target: int
    variance: float = 0.0
    edits: EditSet = Field(default_factory=EditSet)
    cell_width: int = DEFAULT_CELL_WIDTH
    is_valid: bool = False
    validation_message: str = INVALID_MESSAGE
