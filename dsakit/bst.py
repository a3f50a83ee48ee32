"""An unbalanced binary search tree that keeps duplicate keys."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("key", "left", "right")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.left: _Node | None = None
        self.right: _Node | None = None


class BST(Generic[T]):
    """Binary search tree; equal keys go to the right subtree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._count = 0

    def insert(self, key: T) -> None:
        """Add *key* to the tree, keeping duplicates."""
        node = _Node(key)
        self._count += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __contains__(self, key: object) -> bool:
        current = self._root
        while current is not None:
            if current.key < key:
                current = current.right
            elif current.key > key:
                current = current.left
            else:
                return True
        return False

    def in_order_walk(self) -> list[T]:
        """Return every key in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        pending: list[_Node] = []
        current = self._root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            node = pending.pop()
            yield node.key
            current = node.right

    def minimum(self) -> T | None:
        """Smallest key, or None if the tree is empty."""
        if self._root is None:
            return None
        current = self._root
        while current.left is not None:
            current = current.left
        return current.key

    def maximum(self) -> T | None:
        """Largest key, or None if the tree is empty."""
        if self._root is None:
            return None
        current = self._root
        while current.right is not None:
            current = current.right
        return current.key

    def __len__(self) -> int:
        return self._count