"""Randomized greedy placement of non-attacking queens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from ..core.models import CandidateSet, Cell
from ..utils.logger import get_logger
from ..utils.random_source import RandomSource
from .constraints import all_valid_cells


LOGGER = get_logger(__name__)

CandidatesObserver = Callable[[CandidateSet], None]


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search attempt; may hold fewer than ``dimension`` cells."""

    candidates: CandidateSet
    dimension: int

    @property
    def complete(self) -> bool:
        return len(self.candidates) == self.dimension


def search(
    dimension: int,
    rng: RandomSource,
    on_candidates_update: Optional[CandidatesObserver] = None,
) -> SearchResult:
    """Grow a candidate set one uniformly chosen valid cell at a time.

    There is no backtracking: the attempt ends as soon as no valid cell is
    left, which may happen before ``dimension`` candidates are placed. The
    caller decides whether to retry.
    """

    candidates: List[Cell] = []
    valid_cells = all_valid_cells(dimension, candidates)
    while valid_cells:
        candidate = rng.choice(valid_cells)
        candidates.append(candidate)
        if on_candidates_update is not None:
            on_candidates_update(tuple(candidates))
        valid_cells = all_valid_cells(dimension, candidates)

    LOGGER.debug("Search placed %d/%d candidates", len(candidates), dimension)
    return SearchResult(candidates=tuple(candidates), dimension=dimension)
