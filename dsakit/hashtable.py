"""A separately chained hash table that grows when it becomes too full."""

from __future__ import annotations

import sys
from collections.abc import Hashable, Sequence
from typing import Generic, TypeVar

DEFAULT_CAPACITY = 10
MAX_LOAD_FACTOR = 0.7
GROWTH_FACTOR = 2

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class HashTable(Generic[K, V]):
    """Map keys to values using a list of buckets, each a list of pairs."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = max(capacity, 1)
        self._count = 0
        self._buckets: list[list[list]] = [[] for _ in range(self._capacity)]

    def _bucket(self, key: K) -> list[list]:
        return self._buckets[hash(key) % self._capacity]

    def put(self, key: K, value: V) -> None:
        """Store *value* under *key*, replacing any existing value."""
        bucket = self._bucket(key)
        for pair in bucket:
            if pair[0] == key:
                pair[1] = value
                break
        else:
            bucket.append([key, value])
            self._count += 1
        if self.load_factor >= MAX_LOAD_FACTOR:
            self._resize(self._capacity * GROWTH_FACTOR)

    def get(self, key: K) -> V | None:
        """Return the value stored under *key*, or None if it is absent."""
        return next((value for k, value in self._bucket(key) if k == key), None)

    def remove(self, key: K) -> None:
        """Remove *key* and its value; absent keys are ignored."""
        bucket = self._bucket(key)
        kept = [pair for pair in bucket if pair[0] != key]
        if len(kept) != len(bucket):
            self._count -= len(bucket) - len(kept)
            bucket[:] = kept

    @property
    def load_factor(self) -> float:
        """Ratio of stored entries to buckets."""
        return self._count / self._capacity

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return self._capacity

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return "\n".join(
            f"{index}:" + "".join(f" -> ({k}, {v})" for k, v in bucket)
            for index, bucket in enumerate(self._buckets)
        )

    def _resize(self, capacity: int) -> None:
        old_buckets = self._buckets
        self._capacity = capacity
        self._count = 0
        self._buckets = [[] for _ in range(capacity)]
        for bucket in old_buckets:
            for key, value in bucket:
                self.put(key, value)


def main(argv: Sequence[str] | None = None) -> int:
    """Store one entry and print it back."""
    table: HashTable[str, int] = HashTable()
    table.put("age", 5)
    sys.stdout.write(f"{table.get('age')}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())