"""A stack that reports its largest element in constant time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .stacks import StackUnderflow


@dataclass(eq=False, slots=True)
class _Node:
    value: int
    next: Optional["_Node"]
    max: "_Node" = field(init=False)


class MaxStack:
    """Linked stack in which every node refers to the largest node below it.

    No value is stored twice: each node keeps a reference to the node that
    holds the maximum of itself and everything beneath it.
    """

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, value: int) -> None:
        """Place ``value`` on top."""
        node = _Node(value, self._head)
        node.max = node
        if self._head is not None and self._head.max.value > value:
            node.max = self._head.max
        self._head = node
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value; raise StackUnderflow when empty."""
        if self._head is None:
            raise StackUnderflow("stack empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def find_max(self) -> int:
        """Return the largest value on the stack; raise StackUnderflow when empty."""
        if self._head is None:
            raise StackUnderflow("stack empty")
        return self._head.max.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size