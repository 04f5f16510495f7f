"""Persistent board document store.

Every generation (success or failure) can be saved as a JSON document under
``local_db/collections/boards/``. The documents are frontend-ready and contain
the queen positions, the region grid and summary stats.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ..utils.logger import get_logger
from .regions import region_sizes

if TYPE_CHECKING:
    from ..core.models import Board
    from .generator import GeneratorConfig


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections/boards")


class BoardStore:
    """Save board generation results as structured JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save_success(
        self,
        board: "Board",
        config: "GeneratorConfig",
        solution_count: Optional[int] = None,
    ) -> str:
        """Persist a generated board and return its document ID."""
        doc_id = self._new_id()
        doc = {
            "id": doc_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "status": "success",
            "config": self._serialize_config(config),
            **board.to_jsonable(),
            "stats": self._compute_stats(board, solution_count),
        }
        self._write(doc_id, doc)
        LOGGER.info("Board saved: %s", doc_id)
        return doc_id

    def save_failure(self, config: "GeneratorConfig", error: str) -> str:
        """Persist a failed generation and return its document ID."""
        doc_id = self._new_id()
        doc = {
            "id": doc_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "status": "failed",
            "error": error,
            "config": self._serialize_config(config),
        }
        self._write(doc_id, doc)
        LOGGER.info("Board failure saved: %s", doc_id)
        return doc_id

    def load(self, doc_id: str) -> dict:
        path = self.store_dir / f"{doc_id}.json"
        return json.loads(path.read_text(encoding="utf-8"))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _write(self, doc_id: str, doc: dict) -> None:
        path = self.store_dir / f"{doc_id}.json"
        path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")

    @staticmethod
    def _compute_stats(board: "Board", solution_count: Optional[int]) -> dict:
        sizes = region_sizes(board.regions)
        ordered = [sizes.get(color, 0) for color in board.region_colors()]
        return {
            "total_cells": board.dimension * board.dimension,
            "region_sizes": ordered,
            "region_size_min": min(ordered) if ordered else 0,
            "region_size_max": max(ordered) if ordered else 0,
            "attempts": board.attempts,
            "solution_count": solution_count,
        }

    @staticmethod
    def _serialize_config(config: "GeneratorConfig") -> dict:
        return {
            "dimension": config.dimension,
            "seed": config.seed,
            "max_attempts": config.max_attempts,
            "palette": list(config.palette),
        }

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
