"""Data models supporting the board generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .constants import DEFAULT_PALETTE, Bounds


Cell = Tuple[int, int]
CandidateSet = Tuple[Cell, ...]
RegionMap = Dict[Cell, str]


@dataclass
class Cluster:
    """A connected group of uncoloured cells found during flood filling."""

    cells: List[Cell] = field(default_factory=list)
    # Distinct neighbour colours in discovery order.
    colors: List[str] = field(default_factory=list)

    def add_color(self, color: str) -> None:
        if color not in self.colors:
            self.colors.append(color)


@dataclass(frozen=True)
class Board:
    """A generated puzzle board: markers plus the full region colouring."""

    dimension: int
    candidates: CandidateSet
    regions: Mapping[Cell, str]
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    attempts: int = 1
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        # Region map is read-only once the board is handed out.
        object.__setattr__(self, "regions", MappingProxyType(dict(self.regions)))

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.dimension)

    def region_index(self, cell: Cell) -> int:
        return self.palette.index(self.regions[cell])

    def region_cells(self, color: str) -> List[Cell]:
        return sorted(cell for cell, value in self.regions.items() if value == color)

    def region_colors(self) -> Sequence[str]:
        return self.palette[: len(self.candidates)]

    def to_jsonable(self) -> dict:
        return {
            "dimension": self.dimension,
            "candidates": [list(cell) for cell in self.candidates],
            "regions": [
                [self.region_index((row, col)) for col in range(self.dimension)]
                for row in range(self.dimension)
            ],
            "palette": list(self.region_colors()),
        }
