"""Max priority queue of key/value pairs that is stable among equal keys."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Pair:
    """A key with its associated value."""

    key: int
    value: int


class HeapOverflow(Exception):
    """Raised when inserting into a full priority queue."""


class HeapUnderflow(Exception):
    """Raised when reading from or removing out of an empty priority queue."""


class PriorityQueue:
    """Heap of pairs ordered by largest key, then earliest insertion.

    ``insert`` and ``delete`` take O(log n); ``find`` takes O(1).
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._heap: list[tuple[int, int, Pair]] = []
        self._arrivals = itertools.count()

    def insert(self, pair: Pair) -> None:
        """Add ``pair``; raise HeapOverflow when the queue is full."""
        if self._capacity is not None and len(self._heap) >= self._capacity:
            raise HeapOverflow("heap overflow")
        heapq.heappush(self._heap, (-pair.key, next(self._arrivals), pair))

    def find(self) -> Pair:
        """Return the pair with the largest key, earliest inserted among ties."""
        if not self._heap:
            raise HeapUnderflow("heap underflow")
        return self._heap[0][2]

    def delete(self) -> Pair:
        """Remove and return the pair that ``find`` would return."""
        if not self._heap:
            raise HeapUnderflow("heap underflow")
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)