"""LIFO stacks: a bounded array, a resizing array and a linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from .dynamic_array import DynamicArray


class StackOverflow(Exception):
    """Raised when pushing onto a full bounded stack."""


class StackUnderflow(Exception):
    """Raised when popping from or peeking at an empty stack."""


class ArrayStack:
    """Stack backed by a fixed number of slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def push(self, value: int) -> None:
        """Place ``value`` on top; raise StackOverflow when full."""
        if self.is_full():
            raise StackOverflow("overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise StackUnderflow when empty."""
        if not self._items:
            raise StackUnderflow("underflow")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class DynamicStack:
    """Unbounded stack whose reserved capacity doubles and halves with use."""

    def __init__(self) -> None:
        self._array = DynamicArray()

    def is_empty(self) -> bool:
        return len(self._array) == 0

    def push(self, value: int) -> None:
        """Place ``value`` on top, growing the storage when it is full."""
        self._array.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise StackUnderflow when empty."""
        try:
            return self._array.pop()
        except IndexError:
            raise StackUnderflow("underflow") from None

    def push_bottom(self, value: int) -> None:
        """Place ``value`` beneath every element already on the stack."""
        if self.is_empty():
            self.push(value)
            return
        top = self.pop()
        self.push_bottom(value)
        self.push(top)

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._array.capacity

    def __len__(self) -> int:
        return len(self._array)


@dataclass(slots=True)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedStack:
    """Unbounded stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def push(self, value: Any) -> None:
        """Place ``value`` on top."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value; raise StackUnderflow when empty."""
        if self._head is None:
            raise StackUnderflow("stack underflow")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._head is None:
            raise StackUnderflow("stack is empty")
        return self._head.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next


class _Stack(Protocol):
    def is_empty(self) -> bool: ...

    def push(self, value: int) -> None: ...

    def pop(self) -> int: ...


def _smallest(stack: _Stack) -> int:
    value = stack.pop()
    if stack.is_empty():
        stack.push(value)
        return value
    below = _smallest(stack)
    stack.push(value)
    return min(value, below)


def _remove(stack: _Stack, target: int) -> None:
    value = stack.pop()
    if value == target:
        return
    _remove(stack, target)
    stack.push(value)


def delete_min(stack: _Stack) -> int:
    """Remove the smallest value from ``stack`` and return it.

    Only the stack operations are used. The other values keep their order;
    when the minimum occurs more than once, the occurrence nearest the top
    is removed. Raises StackUnderflow on an empty stack.
    """
    if stack.is_empty():
        raise StackUnderflow("stack is empty")
    smallest = _smallest(stack)
    _remove(stack, smallest)
    return smallest