# FILE: forcing_core/__init__.py
"""
forcing_core package: 4x4 forcing-matrix generation, validation, and edit resolution.
"""
from .models import Cell, Grid, SeedPair, CellEdit, EditSet, AppConfig, MatrixState, EditConflictError
from .engine import generate, reset, evaluate, new_state, start, apply_edit
from .validation import validate, validation_message
from .edits import resolve_edit

__all__ = [
    "models",
    "permutations",
    "distribution",
    "seeds",
    "grid",
    "validation",
    "edits",
    "constraints",
    "engine",
    "io",
    "config",
    "Cell",
    "Grid",
    "SeedPair",
    "CellEdit",
    "EditSet",
    "AppConfig",
    "MatrixState",
    "EditConflictError",
    "generate",
    "reset",
    "evaluate",
    "new_state",
    "start",
    "apply_edit",
    "validate",
    "validation_message",
    "resolve_edit",
]
