"""CP-SAT solution counting for generated boards using OR-Tools."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from ortools.sat.python import cp_model

from ..core.models import Board, Cell
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class _SolutionCollector(cp_model.CpSolverSolutionCallback):
    """Record solutions until ``limit`` is reached."""

    def __init__(self, cell_vars: Dict[Cell, cp_model.IntVar], limit: int) -> None:
        super().__init__()
        self._cell_vars = cell_vars
        self._limit = limit
        self.solutions: List[Tuple[Cell, ...]] = []

    def on_solution_callback(self) -> None:
        queens = tuple(
            sorted(cell for cell, var in self._cell_vars.items() if self.boolean_value(var))
        )
        self.solutions.append(queens)
        if len(self.solutions) >= self._limit:
            self.stop_search()


def _build_model(board: Board) -> Tuple[cp_model.CpModel, Dict[Cell, cp_model.IntVar]]:
    model = cp_model.CpModel()
    n = board.dimension

    # ------------------------------------------------------------------
    # Step 1: One boolean per cell
    # ------------------------------------------------------------------
    cell_vars: Dict[Cell, cp_model.IntVar] = {
        (r, c): model.new_bool_var(f"Q_{r}_{c}") for r in range(n) for c in range(n)
    }

    # ------------------------------------------------------------------
    # Step 2: Rows, columns and regions hold exactly one queen
    # ------------------------------------------------------------------
    for r in range(n):
        model.add_exactly_one([cell_vars[(r, c)] for c in range(n)])
    for c in range(n):
        model.add_exactly_one([cell_vars[(r, c)] for r in range(n)])

    by_region: Dict[str, List[cp_model.IntVar]] = defaultdict(list)
    for cell, color in board.regions.items():
        by_region[color].append(cell_vars[cell])
    for variables in by_region.values():
        model.add_exactly_one(variables)

    # ------------------------------------------------------------------
    # Step 3: Queens never touch, diagonals included
    # ------------------------------------------------------------------
    for r in range(n - 1):
        for c in range(n - 1):
            model.add_at_most_one(
                cell_vars[(r, c)],
                cell_vars[(r + 1, c)],
                cell_vars[(r, c + 1)],
                cell_vars[(r + 1, c + 1)],
            )
    return model, cell_vars


def enumerate_solutions(
    board: Board, limit: int = 2, timeout: float = 10.0
) -> List[Tuple[Cell, ...]]:
    """Return up to ``limit`` queen placements solving ``board``."""

    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    model, cell_vars = _build_model(board)
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.enumerate_all_solutions = True
    # Enumeration requires a single search worker.
    solver.parameters.num_workers = 1

    collector = _SolutionCollector(cell_vars, limit)
    status = solver.solve(model, collector)
    LOGGER.debug(
        "CP-SAT: %d solution(s) for %dx%d board (status=%s, %.2fs)",
        len(collector.solutions),
        board.dimension,
        board.dimension,
        solver.status_name(status),
        solver.wall_time,
    )
    return collector.solutions


def count_solutions(board: Board, limit: int = 2, timeout: float = 10.0) -> int:
    """Count solutions of ``board``, stopping once ``limit`` are found."""
    return len(enumerate_solutions(board, limit=limit, timeout=timeout))


def find_solution(board: Board, timeout: float = 10.0) -> Optional[Tuple[Cell, ...]]:
    solutions = enumerate_solutions(board, limit=1, timeout=timeout)
    return solutions[0] if solutions else None


def has_unique_solution(board: Board, timeout: float = 10.0) -> bool:
    return count_solutions(board, limit=2, timeout=timeout) == 1
