"""Binary search tree operations on plain linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """Tree node; nodes compare by identity."""

    value: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` and return the root; equal values go to the right."""
    new = Node(value)
    if root is None:
        return new
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def insert_unique(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` unless it is already present, and return the root."""
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value)
                return root
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value)
                return root
            node = node.right
        else:
            return root


def build(values: Iterable[int]) -> Optional[Node]:
    """Insert ``values`` in order into an empty tree and return its root."""
    root: Optional[Node] = None
    for value in values:
        root = insert(root, value)
    return root


def search(root: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None if it is absent."""
    node = root
    while node is not None:
        if node.value < value:
            node = node.right
        elif node.value > value:
            node = node.left
        else:
            return node
    return None


def find_min(root: Optional[Node]) -> Optional[Node]:
    """Return the node with the smallest value, or None for an empty tree."""
    if root is None:
        return None
    node = root
    while node.left is not None:
        node = node.left
    return node


def find_max(root: Optional[Node]) -> Optional[Node]:
    """Return the node with the largest value, or None for an empty tree."""
    if root is None:
        return None
    node = root
    while node.right is not None:
        node = node.right
    return node


def _detach(node: Node) -> Node:
    node.left = None
    node.right = None
    return node


def delete(root: Optional[Node], value: int) -> tuple[Optional[Node], Optional[Node]]:
    """Remove one node holding ``value``.

    Returns ``(new_root, removed_node)``; ``removed_node`` is None when the
    value is absent. A node with two children takes the value of its
    in-order successor, and the successor's node is the one removed.
    """
    if root is None:
        return None, None

    if value == root.value:
        if root.left is None:
            rest = root.right
            return rest, _detach(root)
        if root.right is None:
            rest = root.left
            return rest, _detach(root)
        successor = find_min(root.right)
        assert successor is not None
        root.value = successor.value
        root.right, removed = delete(root.right, successor.value)
        return root, removed

    if value > root.value:
        root.right, removed = delete(root.right, value)
    else:
        root.left, removed = delete(root.left, value)
    return root, removed


def lowest_common_ancestor(root: Optional[Node], v1: int, v2: int) -> Optional[int]:
    """Return the value of the node where the paths to ``v1`` and ``v2`` split.

    Returns None for an empty tree.
    """
    node = root
    while node is not None:
        if v1 < node.value and v2 < node.value:
            node = node.left
        elif v1 > node.value and v2 > node.value:
            node = node.right
        else:
            return node.value
    return None


def _rotate_right(node: Node) -> Node:
    """Lift the left child of ``node`` above it."""
    top = node.left
    assert top is not None
    node.left = top.right
    top.right = node
    return top


def _rotate_left(node: Node) -> Node:
    """Lift the right child of ``node`` above it."""
    top = node.right
    assert top is not None
    node.right = top.left
    top.left = node
    return top


def _quick(node: Optional[Node], key: int) -> tuple[Optional[Node], Optional[Node]]:
    if node is None:
        return None, None
    if node.left is not None and node.left.value == key:
        top = _rotate_right(node)
        return top, top
    if node.right is not None and node.right.value == key:
        top = _rotate_left(node)
        return top, top
    if key < node.value:
        found, subtree = _quick(node.left, key)
        if found is not None:
            node.left = subtree
        return found, node
    if key > node.value:
        found, subtree = _quick(node.right, key)
        if found is not None:
            node.right = subtree
        return found, node
    return node, node


def quick_search(root: Optional[Node], key: int) -> tuple[Optional[Node], Optional[Node]]:
    """Find ``key`` and lift its node one level closer to the root.

    Returns ``(node, new_root)``. When ``key`` is absent the tree is left
    untouched and ``(None, root)`` is returned.
    """
    found, new_root = _quick(root, key)
    if found is None:
        return None, root
    return found, new_root


def inorder(root: Optional[Node]) -> Iterator[int]:
    """Yield the values in ascending order."""
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def depth(root: Optional[Node], value: int) -> int:
    """Return the depth of the node holding ``value``; the root is at depth 0.

    Raises KeyError when the value is absent.
    """
    level = 0
    node = root
    while node is not None:
        if node.value < value:
            node = node.right
        elif node.value > value:
            node = node.left
        else:
            return level
        level += 1
    raise KeyError(value)