"""Shared constants for the queens board generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


DEFAULT_PALETTE: Tuple[str, ...] = (
    "hsl(18, 100%, 50%)",
    "hsl(45, 100%, 50%)",
    "hsl(110, 100%, 50%)",
    "hsl(165, 100%, 50%)",
    "hsl(200, 100%, 50%)",
    "hsl(240, 100%, 50%)",
    "hsl(310, 100%, 50%)",
    "hsl(340, 100%, 50%)",
)

ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
# 8-neighbourhood plus the cell itself.
NEIGHBOURHOOD_STEPS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)
)

DEFAULT_MAX_ATTEMPTS = 10_000


@dataclass(frozen=True)
class Bounds:
    """Square board bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cells(self):
        """Yield every cell in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield (row, col)
