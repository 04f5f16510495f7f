"""Pretty-print helpers for generated boards."""

from __future__ import annotations

import string
import sys
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.models import Board


REGION_LETTERS = string.ascii_lowercase


def cell_symbol(board: Board, row: int, col: int) -> str:
    """Region letter for the cell, upper-cased where a queen sits."""
    letter = REGION_LETTERS[board.region_index((row, col)) % len(REGION_LETTERS)]
    if (row, col) in board.candidates:
        return letter.upper()
    return letter


def format_board(board: Board) -> str:
    size = board.dimension
    header_cells = [f"{c:>2}" for c in range(size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * size - 1))
    for r in range(size):
        row_render = " ".join(f"{cell_symbol(board, r, c):>2}" for c in range(size))
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def print_board_stats(
    board: Board,
    solution_count: Optional[int] = None,
    *,
    stream=None,
) -> None:
    """Print board + region stats for a generated board."""

    stream = stream or sys.stdout
    print(format_board(board), file=stream)

    print(file=stream)
    print("--- Board ---", file=stream)
    print(f"  Size:          {board.dimension} x {board.dimension} ({board.dimension ** 2} cells)", file=stream)
    print(f"  Attempts:      {board.attempts}", file=stream)

    print(file=stream)
    print("--- Regions ---", file=stream)
    for index, color in enumerate(board.region_colors()):
        letter = REGION_LETTERS[index % len(REGION_LETTERS)].upper()
        row, col = board.candidates[index]
        size = len(board.region_cells(color))
        print(f"  {letter}  {color:<20} queen ({row},{col})  {size:>3} cells", file=stream)

    if solution_count is not None:
        print(file=stream)
        print("--- Solutions ---", file=stream)
        label = "unique" if solution_count == 1 else f"{solution_count}+ found"
        print(f"  {label}", file=stream)

    if board.seed is not None:
        print(file=stream)
        print(f"Seed: {board.seed}", file=stream)
