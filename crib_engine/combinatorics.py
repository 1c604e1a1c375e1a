from __future__ import annotations
from math import comb
from typing import FrozenSet, Iterable, Iterator, Sequence, Tuple
from logging import getLogger

from .cards import Card

logger = getLogger(__name__)


class Combinations:
    """Every r-card subset of a sequence, produced lazily by index increment.

    Iterating again restarts from the first subset.
    """

    def __init__(self, sequence: Iterable[Card], r: int):
        if r < 0:
            raise ValueError(f"r must be non-negative, got {r}")
        self.pool: Tuple[Card, ...] = tuple(sequence)
        self.r = r

    def __len__(self) -> int:
        return comb(len(self.pool), self.r)

    def __iter__(self) -> Iterator[FrozenSet[Card]]:
        for indices in index_sets(len(self.pool), self.r):
            yield frozenset(self.pool[i] for i in indices)


def index_sets(n: int, r: int) -> Iterator[Sequence[int]]:
    if r > n:
        return
    indices = list(range(r))
    yield tuple(indices)
    while True:
        # rightmost index that can still move
        for i in reversed(range(r)):
            if indices[i] != i + n - r:
                break
        else:
            return
        indices[i] += 1
        for j in range(i + 1, r):
            indices[j] = indices[j - 1] + 1
        yield tuple(indices)


def combinations(sequence: Iterable[Card], r: int) -> Combinations:
    return Combinations(sequence, r)
