"""Binary max- and min-heaps, heap sort, and the minimum of a max-heap."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Optional

_Before = Callable[[int, int], bool]


class HeapFull(Exception):
    """Raised when inserting into a heap that has reached its capacity."""


class HeapEmpty(Exception):
    """Raised when reading from or removing out of an empty heap."""


def _sift_up(items: list[int], index: int, before: _Before) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not before(items[index], items[parent]):
            return
        items[index], items[parent] = items[parent], items[index]
        index = parent


def _sift_down(items: list[int], index: int, size: int, before: _Before) -> None:
    while True:
        left = 2 * index + 1
        right = left + 1
        best = index
        if left < size and before(items[left], items[best]):
            best = left
        if right < size and before(items[right], items[best]):
            best = right
        if best == index:
            return
        items[index], items[best] = items[best], items[index]
        index = best


def _heapify(items: list[int], before: _Before) -> None:
    size = len(items)
    for index in reversed(range(size // 2)):
        _sift_down(items, index, size, before)


def _sort_in_place(items: list[int], before: _Before) -> list[int]:
    _heapify(items, before)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end, before)
    return items


class _BinaryHeap:
    """Array-backed binary heap ordered by ``_before``."""

    _before: _Before
    _empty_message: str

    def _setup(self, values: Iterable[int], capacity: Optional[int]) -> None:
        self._items = list(values)
        if capacity is not None and capacity < len(self._items):
            raise ValueError("capacity is smaller than the number of values")
        self._capacity = capacity
        _heapify(self._items, self._before)

    def _insert(self, value: int) -> None:
        if self._capacity is not None and len(self._items) >= self._capacity:
            raise HeapFull("heap overflow")
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1, self._before)

    def _top(self) -> int:
        if not self._items:
            raise HeapEmpty(self._empty_message)
        return self._items[0]

    def _extract(self) -> int:
        top = self._top()
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, 0, len(self._items), self._before)
        return top

    def _promote(self, index: int, value: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("heap index out of range")
        if self._before(value, self._items[index]):
            self._items[index] = value
            _sift_up(self._items, index, self._before)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class MaxHeap(_BinaryHeap):
    """Heap in which every parent is at least as large as its children."""

    _before = staticmethod(operator.gt)
    _empty_message = "Heap underflow"

    def __init__(self, values: Iterable[int] = (), capacity: Optional[int] = None) -> None:
        self._setup(values, capacity)

    def insert(self, value: int) -> None:
        """Add ``value``; raise HeapFull when the heap is at capacity."""
        self._insert(value)

    def maximum(self) -> int:
        """Return the largest value; raise HeapEmpty when empty."""
        return self._top()

    def extract_max(self) -> int:
        """Remove and return the largest value; raise HeapEmpty when empty."""
        return self._extract()

    def increase_key(self, index: int, value: int) -> None:
        """Raise the value at array position ``index`` to ``value``.

        Nothing changes when ``value`` is not larger than the current one.
        """
        self._promote(index, value)

    def to_list(self) -> list[int]:
        """Return the values in heap (array) order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class MinHeap(_BinaryHeap):
    """Heap in which every parent is at most as large as its children."""

    _before = staticmethod(operator.lt)
    _empty_message = "Heap empty"

    def __init__(self, values: Iterable[int] = (), capacity: Optional[int] = None) -> None:
        self._setup(values, capacity)

    def insert(self, value: int) -> None:
        """Add ``value``; raise HeapFull when the heap is at capacity."""
        self._insert(value)

    def minimum(self) -> int:
        """Return the smallest value; raise HeapEmpty when empty."""
        return self._top()

    def extract_min(self) -> int:
        """Remove and return the smallest value; raise HeapEmpty when empty."""
        return self._extract()

    def decrease_key(self, index: int, value: int) -> None:
        """Lower the value at array position ``index`` to ``value``.

        Nothing changes when ``value`` is not smaller than the current one.
        """
        self._promote(index, value)

    def to_list(self) -> list[int]:
        """Return the values in heap (array) order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted with a max-heap."""
    return _sort_in_place(list(values), operator.gt)


def heap_sort_descending(values: Iterable[int]) -> list[int]:
    """Return the values in descending order, sorted with a min-heap."""
    return _sort_in_place(list(values), operator.lt)


def min_of_max_heap(values: Iterable[int]) -> int:
    """Return the smallest value of a max-heap given in array order.

    Only the leaves, which start at position ``n // 2``, are examined.
    Raises HeapEmpty for an empty heap.
    """
    items = list(values)
    if not items:
        raise HeapEmpty("Heap empty")
    return min(items[len(items) // 2:])