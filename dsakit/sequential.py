"""Stack and queue collections sharing a common sequential base."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SequentialCollection(ABC, Generic[T]):
    """A collection whose elements leave in an order fixed by the subclass."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    @abstractmethod
    def push(self, item: T) -> None:
        """Put a new element in the collection."""

    @abstractmethod
    def pop(self) -> T:
        """Remove and return the next element."""

    @abstractmethod
    def peek(self) -> T:
        """Return the next element without removing it."""

    def remove(self, item: T) -> None:
        """Remove every occurrence of *item*."""
        self._items = deque(x for x in self._items if x != item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "".join(f" -> ({item})" for item in self._items)


class Stack(SequentialCollection[T]):
    """Last in, first out."""

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("Unable to pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("Unable to peek from empty stack")
        return self._items[-1]


class Queue(SequentialCollection[T]):
    """First in, first out."""

    def push(self, item: T) -> None:
        self._items.appendleft(item)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("Unable to pop from empty queue")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("Unable to peek from empty queue")
        return self._items[-1]