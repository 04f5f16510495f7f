"""Queens region-board generator package.

This package exposes the public API surface via:

- ``queens.engine.generator.BoardGenerator``: orchestrates board generation.
- ``queens.engine.generator.generate_board``: functional entry point returning
  the queen positions and the region map.
- ``queens.engine.background.BackgroundGenerator``: runs generation off the
  caller's thread.
"""

from .core.constants import DEFAULT_PALETTE
from .core.models import Board
from .engine.background import BackgroundGenerator
from .engine.generator import BoardGenerator, GeneratorConfig, generate_board

__all__ = [
    "BackgroundGenerator",
    "Board",
    "BoardGenerator",
    "DEFAULT_PALETTE",
    "GeneratorConfig",
    "generate_board",
]

__version__ = "0.1.0"
