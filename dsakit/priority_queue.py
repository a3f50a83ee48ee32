"""A binary max-heap priority queue."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Pops the largest element first."""

    def __init__(self) -> None:
        self._heap: list[Any] = []

    def peek(self) -> T:
        """Return the largest element without removing it."""
        if not self._heap:
            raise IndexError("PriorityQueue is empty")
        return self._heap[0]

    def pop(self) -> T:
        """Remove and return the largest element."""
        if not self._heap:
            raise IndexError("PriorityQueue is empty")
        largest = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return largest

    def push(self, key: T) -> None:
        """Add *key* to the queue."""
        self._heap.append(key)
        self._sift_up(len(self._heap) - 1)

    def __len__(self) -> int:
        return len(self._heap)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._heap)

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if not heap[parent] < heap[i]:
                break
            heap[i], heap[parent] = heap[parent], heap[i]
            i = parent

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            largest = i
            if left < size and heap[left] > heap[largest]:
                largest = left
            if right < size and heap[right] > heap[largest]:
                largest = right
            if largest == i:
                return
            heap[i], heap[largest] = heap[largest], heap[i]
            i = largest