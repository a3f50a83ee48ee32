"""An unweighted graph with depth-first and breadth-first path search."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Mapping
from typing import Generic, TypeVar

V = TypeVar("V", bound=Hashable)


def path_from_parents(parents: Mapping[V, V], goal: V) -> list[V]:
    """Follow *parents* back from *goal* to the vertex that is its own parent.

    Returns the path from that start vertex to *goal*. Raises KeyError if a
    vertex on the way has no recorded parent.
    """
    path = deque([goal])
    current = goal
    while (previous := parents[current]) != current:
        path.appendleft(previous)
        current = previous
    return list(path)


class Graph(Generic[V]):
    """A graph stored as an adjacency mapping from each vertex to its neighbours."""

    def __init__(self) -> None:
        # Inner dicts act as insertion-ordered sets so searches are repeatable.
        self._adjacency: dict[V, dict[V, None]] = {}

    def add_vertex(self, vertex: V) -> None:
        """Add *vertex* if it is not already present."""
        self._adjacency.setdefault(vertex, {})

    def add_edge(self, from_vertex: V, to_vertex: V, bidirectional: bool = True) -> None:
        """Add an edge, adding either end as a vertex if it is missing."""
        self._adjacency.setdefault(from_vertex, {})[to_vertex] = None
        if bidirectional:
            self._adjacency.setdefault(to_vertex, {})[from_vertex] = None
        else:
            self.add_vertex(to_vertex)

    def neighbors(self, vertex: V) -> frozenset[V]:
        """Return the vertices reachable from *vertex* by one edge.

        Raises KeyError if *vertex* is not in the graph.
        """
        if vertex not in self._adjacency:
            raise KeyError(vertex)
        return frozenset(self._adjacency[vertex])

    def _ordered_neighbors(self, vertex: V) -> list[V]:
        if vertex not in self._adjacency:
            raise KeyError(vertex)
        return list(self._adjacency[vertex])

    def edge_exists(self, from_vertex: V, to_vertex: V) -> bool:
        """Whether there is an edge from *from_vertex* to *to_vertex*."""
        return to_vertex in self._adjacency.get(from_vertex, {})

    def dfs(self, start: V, goal: V) -> list[V] | None:
        """Depth-first search for a path from *start* to *goal*, or None."""
        explored: dict[V, V] = {start: start}
        frontier: list[V] = [start]
        while frontier:
            current = frontier.pop()
            if current == goal:
                return path_from_parents(explored, current)
            for neighbor in self._ordered_neighbors(current):
                if neighbor not in explored:
                    explored[neighbor] = current
                    frontier.append(neighbor)
        return None

    def bfs(self, start: V, goal: V) -> list[V] | None:
        """Breadth-first search for a shortest path from *start* to *goal*, or None."""
        explored: dict[V, V] = {start: start}
        frontier: deque[V] = deque([start])
        while frontier:
            current = frontier.popleft()
            if current == goal:
                return path_from_parents(explored, current)
            for neighbor in self._ordered_neighbors(current):
                if neighbor not in explored:
                    explored[neighbor] = current
                    frontier.append(neighbor)
        return None

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex}: " + "".join(f"{n}, " for n in neighbors)
            for vertex, neighbors in self._adjacency.items()
        )