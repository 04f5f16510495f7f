"""Main board generator orchestration.

Two-phase approach:
  1. Placement: retry the randomized queen search until it places ``dimension``
     queens, up to a bounded number of attempts.
  2. Partition: grow one coloured region around each queen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_MAX_ATTEMPTS, DEFAULT_PALETTE
from ..core.exceptions import GenerationFailedError
from ..core.models import Board, CandidateSet, Cell
from ..utils.logger import get_logger
from ..utils.random_source import RandomSource
from .constraints import check_dimension
from .regions import RegionsObserver, partition_regions
from .search import CandidatesObserver, SearchResult, search


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    dimension: int
    seed: Optional[int] = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    palette: Sequence[str] = DEFAULT_PALETTE


class BoardGenerator:
    """High-level orchestrator: bounded placement retries then partitioning."""

    def __init__(
        self,
        config: GeneratorConfig,
        on_candidates_update: Optional[CandidatesObserver] = None,
        on_regions_update: Optional[RegionsObserver] = None,
    ) -> None:
        self.config = config
        self.rng = RandomSource(config.seed)
        self.on_candidates_update = on_candidates_update
        self.on_regions_update = on_regions_update

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> Board:
        config = self.config
        check_dimension(config.dimension, config.palette)
        if config.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {config.max_attempts}")

        result, attempts = self._place_candidates()
        LOGGER.info(
            "Placed %d queens on a %dx%d board after %d attempt(s)",
            config.dimension, config.dimension, config.dimension, attempts,
        )
        regions = partition_regions(
            result.candidates,
            config.dimension,
            self.rng,
            palette=config.palette,
            on_regions_update=self.on_regions_update,
        )
        LOGGER.info("Board generation completed with %d regions", len(set(regions.values())))
        return Board(
            dimension=config.dimension,
            candidates=result.candidates,
            regions=regions,
            palette=tuple(config.palette),
            attempts=attempts,
            seed=config.seed,
        )

    # ------------------------------------------------------------------
    # Placement retries
    # ------------------------------------------------------------------
    def _place_candidates(self) -> Tuple[SearchResult, int]:
        config = self.config
        for attempt in range(1, config.max_attempts + 1):
            result = search(config.dimension, self.rng, self.on_candidates_update)
            if result.complete:
                return result, attempt
            LOGGER.debug(
                "Attempt %s/%s dead-ended with %d/%d queens",
                attempt, config.max_attempts, len(result.candidates), config.dimension,
            )
        raise GenerationFailedError(
            f"Unable to place {config.dimension} queens after {config.max_attempts} attempts"
        )


def generate_board(
    dimension: int,
    *,
    seed: Optional[int] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    palette: Sequence[str] = DEFAULT_PALETTE,
    on_candidates_update: Optional[CandidatesObserver] = None,
    on_regions_update: Optional[RegionsObserver] = None,
) -> Tuple[CandidateSet, Mapping[Cell, str]]:
    """Generate a board and return its candidate set and region map."""

    config = GeneratorConfig(
        dimension=dimension, seed=seed, max_attempts=max_attempts, palette=palette
    )
    board = BoardGenerator(
        config,
        on_candidates_update=on_candidates_update,
        on_regions_update=on_regions_update,
    ).generate()
    return board.candidates, board.regions
