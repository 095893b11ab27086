"""FIFO queues: a bounded circular buffer, a resizing array and a linked list."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


class QueueOverflow(Exception):
    """Raised when enqueueing into a full bounded queue."""


class QueueUnderflow(Exception):
    """Raised when dequeueing from an empty queue."""


class ArrayQueue:
    """Circular-buffer queue with a fixed number of slots.

    One slot is always kept free to tell a full queue from an empty one,
    so a queue with ``capacity`` slots holds at most ``capacity - 1`` values.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Optional[int]] = [None] * capacity
        self._head = 0
        self._tail = 0

    def _advance(self, position: int) -> int:
        return (position + 1) % len(self._slots)

    def is_empty(self) -> bool:
        return self._head == self._tail

    def is_full(self) -> bool:
        return self._advance(self._tail) == self._head

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the tail; raise QueueOverflow when full."""
        if self.is_full():
            raise QueueOverflow("overflow")
        self._slots[self._tail] = value
        self._tail = self._advance(self._tail)

    def dequeue(self) -> int:
        """Remove and return the value at the head; raise QueueUnderflow when empty."""
        if self.is_empty():
            raise QueueUnderflow("underflow")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = self._advance(self._head)
        return value

    def __len__(self) -> int:
        return (self._tail - self._head) % len(self._slots)


class DynamicQueue:
    """Unbounded queue whose reserved capacity doubles and halves with use."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()
        self._capacity = 1

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the tail, doubling the capacity if it is full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the head value; raise QueueUnderflow when empty."""
        if not self._items:
            raise QueueUnderflow("underflow")
        value = self._items.popleft()
        if len(self._items) <= self._capacity // 4:
            self._capacity = max(1, self._capacity // 2)
        return value

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)


@dataclass(slots=True)
class _Node:
    data: int
    next: Optional["_Node"] = None


class LinkedQueue:
    """Unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def enqueue(self, value: int) -> None:
        """Append a node holding ``value`` after the tail."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def dequeue(self) -> int:
        """Unlink the head node and return its value; raise QueueUnderflow when empty."""
        if self._head is None:
            raise QueueUnderflow("underflow")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next