"""Rough speed comparisons of the tree and heap against plain lists."""

from __future__ import annotations

import random
import time

from dsakit.bst import BST
from dsakit.priority_queue import PriorityQueue


def _microseconds() -> int:
    return time.perf_counter_ns() // 1000


def _random_values(length: int) -> list[int]:
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    return [random.randint(0, length) for _ in range(length)]


def search_speed(length: int) -> tuple[int, int]:
    """Time *length* lookups in a BST and by linear search in a list.

    Returns ``(bst_time, find_time)`` in microseconds. Raises ValueError
    if *length* is negative.
    """
    values = _random_values(length)
    probes = list(values)
    tree: BST[int] = BST()
    for value in values:
        tree.insert(value)

    start = _microseconds()
    for probe in probes:
        probe in tree
    bst_time = _microseconds() - start

    start = _microseconds()
    for probe in probes:
        probe in values
    find_time = _microseconds() - start

    return bst_time, find_time


def pop_speed(length: int) -> tuple[int, int]:
    """Time popping every element from a PriorityQueue and from a list.

    The list pops by finding and removing its maximum each time. Returns
    ``(pq_time, list_time)`` in microseconds. Raises ValueError if *length*
    is negative.
    """
    values = _random_values(length)
    queue: PriorityQueue[int] = PriorityQueue()
    for value in values:
        queue.push(value)

    start = _microseconds()
    for _ in range(length):
        values.remove(max(values))
    list_time = _microseconds() - start

    start = _microseconds()
    for _ in range(length):
        queue.pop()
    pq_time = _microseconds() - start

    return pq_time, list_time