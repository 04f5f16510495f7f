"""Deterministic rule validation for generated boards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set

from ..core.constants import ORTHOGONAL_STEPS
from ..core.exceptions import ValidationError
from ..core.models import Board, Cell
from ..utils.logger import get_logger
from .constraints import is_independent


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class BoardValidator:
    """Runs deterministic validation over a finished board."""

    def validate(self, board: Board) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_candidates(board)
            self._check_coverage(board)
            self._check_candidate_colors(board)
            self._check_regions(board)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_candidates(self, board: Board) -> None:
        if len(board.candidates) != board.dimension:
            raise ValidationError(
                f"Expected {board.dimension} queens, found {len(board.candidates)}"
            )
        if len(set(board.candidates)) != len(board.candidates):
            raise ValidationError("Duplicate queen positions")
        if not is_independent(board.candidates):
            raise ValidationError("Queens share a row, a column, or touch")

    def _check_coverage(self, board: Board) -> None:
        expected = set(board.bounds.cells())
        actual = set(board.regions)
        missing = expected - actual
        if missing:
            raise ValidationError(f"Uncoloured cell at {min(missing)}")
        extra = actual - expected
        if extra:
            raise ValidationError(f"Coloured cell outside the board at {min(extra)}")

    def _check_candidate_colors(self, board: Board) -> None:
        for index, cell in enumerate(board.candidates):
            if board.regions[cell] != board.palette[index]:
                raise ValidationError(
                    f"Queen {index} at {cell} has colour {board.regions[cell]!r}, "
                    f"expected {board.palette[index]!r}"
                )

    def _check_regions(self, board: Board) -> None:
        colors = set(board.regions.values())
        if len(colors) != board.dimension:
            raise ValidationError(
                f"Expected {board.dimension} regions, found {len(colors)}"
            )
        candidates = set(board.candidates)
        for color in colors:
            cells = set(board.region_cells(color))
            queens = cells & candidates
            if len(queens) != 1:
                raise ValidationError(
                    f"Region {color!r} holds {len(queens)} queens"
                )
            if not self._is_connected(cells):
                raise ValidationError(f"Region {color!r} is not connected")

    @staticmethod
    def _is_connected(cells: Set[Cell]) -> bool:
        if not cells:
            return False
        start = next(iter(cells))
        seen = {start}
        stack = [start]
        while stack:
            row, col = stack.pop()
            for dr, dc in ORTHOGONAL_STEPS:
                neighbour = (row + dr, col + dc)
                if neighbour in cells and neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
        return len(seen) == len(cells)
