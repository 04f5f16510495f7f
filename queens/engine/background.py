"""Run board generation off the caller's thread.

Runs execute one at a time on a single worker. Starting a new run supersedes
the previous one: there is no cancellation, so a superseded run still finishes,
but its progress updates and completion callback are dropped.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import replace
from typing import Callable, Optional

from ..core.models import Board, CandidateSet, RegionMap
from ..utils.logger import get_logger
from .generator import BoardGenerator, GeneratorConfig
from .regions import RegionsObserver
from .search import CandidatesObserver


LOGGER = get_logger(__name__)

CompletionCallback = Callable[[Board], None]


class BackgroundGenerator:
    """Schedules generation runs with single-writer semantics."""

    def __init__(
        self,
        config: GeneratorConfig,
        on_candidates_update: Optional[CandidatesObserver] = None,
        on_regions_update: Optional[RegionsObserver] = None,
        on_complete: Optional[CompletionCallback] = None,
    ) -> None:
        self.config = config
        self.on_candidates_update = on_candidates_update
        self.on_regions_update = on_regions_update
        self.on_complete = on_complete
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="queens-gen")
        self._run_id = 0

    @property
    def current_run(self) -> int:
        return self._run_id

    def start(self, dimension: Optional[int] = None) -> "Future[Board]":
        """Schedule a new run, superseding any earlier one."""

        self._run_id += 1
        run_id = self._run_id
        config = self.config if dimension is None else replace(self.config, dimension=dimension)
        LOGGER.debug("Scheduling run %d for a %dx%d board", run_id, config.dimension, config.dimension)
        return self._executor.submit(self._run, run_id, config)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "BackgroundGenerator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    # ------------------------------------------------------------------
    # Worker side
    # ------------------------------------------------------------------
    def _is_current(self, run_id: int) -> bool:
        return run_id == self._run_id

    def _run(self, run_id: int, config: GeneratorConfig) -> Board:
        def candidates_update(snapshot: CandidateSet) -> None:
            if self.on_candidates_update is not None and self._is_current(run_id):
                self.on_candidates_update(snapshot)

        def regions_update(snapshot: RegionMap) -> None:
            if self.on_regions_update is not None and self._is_current(run_id):
                self.on_regions_update(snapshot)

        board = BoardGenerator(
            config,
            on_candidates_update=candidates_update,
            on_regions_update=regions_update,
        ).generate()
        if self._is_current(run_id):
            if self.on_complete is not None:
                self.on_complete(board)
        else:
            LOGGER.debug("Run %d was superseded by run %d", run_id, self._run_id)
        return board
