"""An unbalanced binary search tree of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False)
class BSTNode:
    """A tree node; equal values go to the right subtree."""

    value: int
    left: BSTNode | None = None
    right: BSTNode | None = None


def _attach(head: BSTNode | None, subtree: BSTNode | None) -> BSTNode | None:
    """Hang ``subtree`` below ``head`` at the place its root value belongs."""
    if head is None:
        return subtree
    if subtree is None:
        return head
    current = head
    while True:
        if subtree.value < current.value:
            if current.left is None:
                current.left = subtree
                return head
            current = current.left
        else:
            if current.right is None:
                current.right = subtree
                return head
            current = current.right


class BinarySearchTree:
    """A binary search tree that keeps duplicate values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: BSTNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> BSTNode:
        """Insert ``value`` and return the new node."""
        node = BSTNode(value)
        self.root = _attach(self.root, node)
        return node

    def search(self, value: int) -> BSTNode | None:
        """Return the first node holding ``value`` on the search path, or None."""
        current = self.root
        while current is not None:
            if current.value == value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def _parent_of(self, node: BSTNode) -> BSTNode | None:
        current = self.root
        while current is not None:
            if current.left is node or current.right is node:
                return current
            current = current.left if node.value < current.value else current.right
        return None

    def delete(self, node: BSTNode | None) -> None:
        """Remove ``node`` from the tree.

        The node's right subtree takes its place, with its left subtree
        re-inserted beneath. A node that is not in this tree is ignored.
        """
        if node is None or self.root is None:
            return
        if node is self.root:
            self.root = _attach(node.right, node.left)
        else:
            parent = self._parent_of(node)
            if parent is None:
                return
            replacement = _attach(node.right, node.left)
            if parent.left is node:
                parent.left = replacement
            else:
                parent.right = replacement
        node.left = node.right = None

    def min_value(self) -> int:
        """Return the smallest value; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("min_value() of an empty tree")
        current = self.root
        while current.left is not None:
            current = current.left
        return current.value

    def max_value(self) -> int:
        """Return the largest value; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("max_value() of an empty tree")
        current = self.root
        while current.right is not None:
            current = current.right
        return current.value

    def in_order(self) -> list[int]:
        """Return all values in ascending (in-order) sequence."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        pending: list[BSTNode] = []
        current = self.root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            current = pending.pop()
            yield current.value
            current = current.right

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()!r})"