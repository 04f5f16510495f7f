"""Placement rules for queen candidates.

A cell is *forbidden* when a candidate already sits in its row, its column,
or anywhere in its 8-neighbourhood (the cell itself included). Every other
cell is *valid* and may receive the next candidate.
"""

from __future__ import annotations

from itertools import combinations
from typing import List, Optional, Sequence

from ..core.constants import NEIGHBOURHOOD_STEPS, Bounds
from ..core.exceptions import (
    InvalidDimensionError,
    InvalidPaletteError,
    PaletteExhaustedError,
)
from ..core.models import Cell


def check_dimension(dimension: int, palette: Optional[Sequence[str]] = None) -> None:
    """Fail fast on dimensions the generator cannot colour."""

    if isinstance(dimension, bool) or not isinstance(dimension, int):
        raise InvalidDimensionError(f"Dimension must be an integer, got {dimension!r}")
    if dimension <= 0:
        raise InvalidDimensionError(f"Dimension must be positive, got {dimension}")
    if palette is not None and dimension > len(palette):
        raise PaletteExhaustedError(
            f"Dimension {dimension} needs {dimension} colours but the palette has {len(palette)}"
        )
    if palette is not None and len(set(palette[:dimension])) < dimension:
        raise InvalidPaletteError(
            f"Palette repeats a colour among its first {dimension} entries: {list(palette[:dimension])}"
        )


def is_candidate(cell: Cell, candidates: Sequence[Cell]) -> bool:
    row, col = cell
    return any(row == c_row and col == c_col for c_row, c_col in candidates)


def is_forbidden(cell: Cell, dimension: int, candidates: Sequence[Cell]) -> bool:
    row, col = cell
    for dr, dc in NEIGHBOURHOOD_STEPS:
        if is_candidate((row + dr, col + dc), candidates):
            return True
    for c_row, c_col in candidates:
        if c_row == row or c_col == col:
            return True
    return False


def all_valid_cells(dimension: int, candidates: Sequence[Cell]) -> List[Cell]:
    """Return every non-forbidden cell in row-major order."""

    return [
        cell for cell in Bounds(dimension).cells()
        if not is_forbidden(cell, dimension, candidates)
    ]


def is_independent(candidates: Sequence[Cell]) -> bool:
    """True when no two candidates share a row, a column, or touch."""

    for (r1, c1), (r2, c2) in combinations(candidates, 2):
        if r1 == r2 or c1 == c2:
            return False
        if max(abs(r1 - r2), abs(c1 - c2)) < 2:
            return False
    return True
