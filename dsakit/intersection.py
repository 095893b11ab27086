"""Find where two singly linked lists merge into one."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from .stacks import LinkedStack


@dataclass(eq=False)
class ListNode:
    """Node of a singly linked list; nodes compare by identity."""

    data: Any
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.data
            node = node.next


class NoIntersection(ValueError):
    """Raised when two lists share no node."""


def from_values(values: Iterable[Any], tail: Optional[ListNode] = None) -> Optional[ListNode]:
    """Build a list holding ``values`` in order, followed by ``tail``.

    Returns the head node, which is ``tail`` itself when ``values`` is empty.
    """
    head = tail
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _stack_of(head: Optional[ListNode]) -> LinkedStack:
    stack = LinkedStack()
    node = head
    while node is not None:
        stack.push(node)
        node = node.next
    return stack


def intersection_point(head1: Optional[ListNode], head2: Optional[ListNode]) -> ListNode:
    """Return the first node that both lists share.

    Both lists are pushed node by node onto stacks; popping while the two
    tops are the same node ends at the merge point. Raises NoIntersection
    when the lists share no node.
    """
    first = _stack_of(head1)
    second = _stack_of(head2)
    merge: Optional[ListNode] = None
    while not first.is_empty() and not second.is_empty() and first.top() is second.top():
        merge = first.pop()
        second.pop()
    if merge is None:
        raise NoIntersection("the lists do not intersect")
    return merge