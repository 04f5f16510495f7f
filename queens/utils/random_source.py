"""Bounded random integers and the uniform shuffle built on them."""

from __future__ import annotations

import random
from typing import List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Seedable source of uniformly distributed integers in a closed range."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        return self._rng.randint(low, high)

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Fisher-Yates shuffle in place."""
        for index in range(len(items) - 1, 0, -1):
            swap = self.randint(0, index)
            items[index], items[swap] = items[swap], items[index]

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        pool: List[T] = list(items)
        self.shuffle(pool)
        return pool[0]
