"""CLI entrypoint for the queens region-board generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from queens.core.constants import DEFAULT_MAX_ATTEMPTS, DEFAULT_PALETTE
from queens.core.exceptions import QueensError
from queens.engine.board_store import DEFAULT_STORE_DIR, BoardStore
from queens.engine.generator import BoardGenerator, GeneratorConfig
from queens.engine.solver import count_solutions
from queens.engine.validator import BoardValidator
from queens.utils.logger import configure_logging
from queens.utils.pretty import print_board_stats


def parse_palette_file(path: Path) -> List[str]:
    """Read colours from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate queens puzzle boards with one coloured region per queen",
    )
    parser.add_argument("--dimension", type=int, default=7, help="Board size in cells (default 7)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help=f"Cap on placement search attempts (default {DEFAULT_MAX_ATTEMPTS})",
    )
    parser.add_argument(
        "--palette-file",
        type=Path,
        metavar="FILE",
        help="File with one region colour per line, replacing the built-in 8-colour palette",
    )
    parser.add_argument(
        "--check-unique",
        action="store_true",
        help="Count solutions of the generated board with CP-SAT",
    )
    parser.add_argument("--pretty", action="store_true", help="Print the board as text instead of JSON")
    parser.add_argument("--save", action="store_true", help="Persist the result as a JSON document")
    parser.add_argument(
        "--store-dir",
        type=Path,
        default=DEFAULT_STORE_DIR,
        help="Directory for saved board documents",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.max_attempts < 1:
        parser.error("--max-attempts must be at least 1")

    palette = parse_palette_file(args.palette_file) if args.palette_file else list(DEFAULT_PALETTE)
    config = GeneratorConfig(
        dimension=args.dimension,
        seed=args.seed,
        max_attempts=args.max_attempts,
        palette=palette,
    )
    store: Optional[BoardStore] = BoardStore(args.store_dir) if args.save else None

    try:
        board = BoardGenerator(config).generate()
    except QueensError as exc:
        logging.getLogger(__name__).error("Generation failed: %s", exc)
        if store is not None:
            store.save_failure(config, str(exc))
        return 1

    validation = BoardValidator().validate(board)
    solution_count = count_solutions(board) if args.check_unique else None
    if store is not None:
        store.save_success(board, config, solution_count=solution_count)

    if args.pretty:
        print_board_stats(board, solution_count)
        for message in validation.messages:
            print(f"Validation: {message}", file=sys.stderr)
        return 0 if validation.ok else 1

    payload: Dict[str, Any] = {
        **board.to_jsonable(),
        "attempts": board.attempts,
        "seed": board.seed,
        "solution_count": solution_count,
        "validation": validation.messages,
    }
    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0 if validation.ok else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
