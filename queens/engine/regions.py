"""Partition a board into one coloured region per queen.

Two phases:
  1. Seed: paint a random square neighbourhood around every candidate.
  2. Merge: flood fill each uncoloured cluster into a neighbouring region.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Set

from ..core.constants import DEFAULT_PALETTE, ORTHOGONAL_STEPS, Bounds
from ..core.exceptions import InvalidCandidatesError, RegionInvariantError
from ..core.models import CandidateSet, Cell, Cluster, RegionMap
from ..utils.logger import get_logger
from ..utils.random_source import RandomSource
from .constraints import check_dimension, is_candidate, is_independent


LOGGER = get_logger(__name__)

RegionsObserver = Callable[[RegionMap], None]


@dataclass
class PartitionContext:
    """Mutable state shared by the partitioning steps of a single run."""

    candidates: CandidateSet
    dimension: int
    rng: RandomSource
    palette: Sequence[str] = DEFAULT_PALETTE
    regions: RegionMap = field(default_factory=dict)
    on_regions_update: Optional[RegionsObserver] = None

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.dimension)

    def notify(self) -> None:
        if self.on_regions_update is not None:
            self.on_regions_update(dict(self.regions))


def partition_regions(
    candidates: Sequence[Cell],
    dimension: int,
    rng: RandomSource,
    palette: Sequence[str] = DEFAULT_PALETTE,
    on_regions_update: Optional[RegionsObserver] = None,
) -> RegionMap:
    """Colour every cell of the board, one region per candidate."""

    check_dimension(dimension, palette)
    ctx = PartitionContext(
        candidates=tuple(candidates),
        dimension=dimension,
        rng=rng,
        palette=palette,
        on_regions_update=on_regions_update,
    )
    _check_candidates(ctx)
    seed_regions(ctx)
    prune_detached_seeds(ctx)
    merges = merge_clusters(ctx)
    LOGGER.debug("Partitioned %dx%d board with %d cluster merges", dimension, dimension, merges)
    return ctx.regions


def _check_candidates(ctx: PartitionContext) -> None:
    if len(ctx.candidates) != ctx.dimension:
        raise InvalidCandidatesError(
            f"Expected {ctx.dimension} candidates, got {len(ctx.candidates)}"
        )
    if len(set(ctx.candidates)) != len(ctx.candidates):
        raise InvalidCandidatesError(f"Duplicate candidates in {ctx.candidates}")
    for row, col in ctx.candidates:
        if not ctx.bounds.contains(row, col):
            raise InvalidCandidatesError(f"Candidate {(row, col)} outside the board")
    if not is_independent(ctx.candidates):
        raise InvalidCandidatesError(
            f"Candidates share a row, a column, or touch: {ctx.candidates}"
        )


# ----------------------------------------------------------------------
# Seeding
# ----------------------------------------------------------------------
def seed_regions(ctx: PartitionContext) -> None:
    """Paint a square of random radius around each candidate.

    Later candidates overwrite cells seeded by earlier ones. A diagonal offset
    that lands on another candidate is never painted.
    """

    for index, (row, col) in enumerate(ctx.candidates):
        color = ctx.palette[index]
        ctx.regions[(row, col)] = color

        smallest_radius = _smallest_radius(ctx.candidates, (row, col))
        if not smallest_radius:
            continue
        radius = ctx.rng.randint(1, smallest_radius)

        for dr in range(-radius, radius + 1):
            for dc in range(-radius, radius + 1):
                cell = (row + dr, col + dc)
                if not ctx.bounds.contains(*cell):
                    continue
                if dr != 0 and dc != 0 and is_candidate(cell, ctx.candidates):
                    continue
                ctx.regions[cell] = color


def _smallest_radius(candidates: CandidateSet, origin: Cell) -> Optional[int]:
    row, col = origin
    distances = [
        (row - other_row) ** 2 + (col - other_col) ** 2
        for other_row, other_col in candidates
        if (other_row, other_col) != origin
    ]
    if not distances:
        return None
    return math.isqrt(min(distances))


def prune_detached_seeds(ctx: PartitionContext) -> int:
    """Uncolour seeded cells cut off from their own candidate.

    Overwrites by later candidates can split an earlier seed square; only the
    part 4-connected to the candidate keeps the colour. Returns the number of
    cells released.
    """

    keep: Set[Cell] = set()
    for index, origin in enumerate(ctx.candidates):
        color = ctx.palette[index]
        stack = [origin]
        keep.add(origin)
        while stack:
            row, col = stack.pop()
            for dr, dc in ORTHOGONAL_STEPS:
                neighbour = (row + dr, col + dc)
                if neighbour in keep or ctx.regions.get(neighbour) != color:
                    continue
                keep.add(neighbour)
                stack.append(neighbour)

    detached = [cell for cell in ctx.regions if cell not in keep]
    for cell in detached:
        del ctx.regions[cell]
    if detached:
        LOGGER.debug("Released %d detached seed cells", len(detached))
    return len(detached)


# ----------------------------------------------------------------------
# Flood fill
# ----------------------------------------------------------------------
def find_unassigned_cell(ctx: PartitionContext) -> Optional[Cell]:
    for cell in ctx.bounds.cells():
        if cell not in ctx.regions:
            return cell
    return None


def collect_cluster(ctx: PartitionContext, start: Cell, visited: Set[Cell]) -> Cluster:
    """Walk the uncoloured component containing ``start`` with an explicit stack."""

    cluster = Cluster()
    visited.add(start)
    stack: List[Cell] = [start]
    while stack:
        row, col = stack.pop()
        cluster.cells.append((row, col))
        for dr, dc in ORTHOGONAL_STEPS:
            neighbour = (row + dr, col + dc)
            if not ctx.bounds.contains(*neighbour):
                continue
            color = ctx.regions.get(neighbour)
            if color is not None:
                cluster.add_color(color)
                continue
            if neighbour in visited:
                continue
            visited.add(neighbour)
            stack.append(neighbour)
    return cluster


def merge_clusters(ctx: PartitionContext) -> int:
    """Fold every uncoloured cluster into an adjacent region.

    Returns the number of clusters merged; zero when the map is already full.
    """

    merges = 0
    visited: Set[Cell] = set()
    start = find_unassigned_cell(ctx)
    while start is not None:
        cluster = collect_cluster(ctx, start, visited)
        if not cluster.colors:
            raise RegionInvariantError(
                f"Cluster of {len(cluster.cells)} cells at {start} touches no coloured cell"
            )
        color = cluster.colors[0]
        for cell in cluster.cells:
            ctx.regions[cell] = color
        merges += 1
        ctx.notify()
        start = find_unassigned_cell(ctx)
    return merges


def region_sizes(regions: RegionMap) -> Dict[str, int]:
    sizes: Dict[str, int] = {}
    for color in regions.values():
        sizes[color] = sizes.get(color, 0) + 1
    return sizes
