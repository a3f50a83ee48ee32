"""A weighted graph with Dijkstra's single-source shortest paths."""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Mapping
from itertools import count
from typing import Generic, TypeVar

from dsakit.graph import path_from_parents

V = TypeVar("V", bound=Hashable)
W = TypeVar("W")


def path_map_to_path(parents: Mapping[V, V], goal: V) -> list[V]:
    """Rebuild the path from the search's start vertex to *goal*.

    *parents* maps each vertex to the vertex it was reached from, with the
    start vertex mapped to itself. Raises KeyError if *goal* or a vertex on
    the way back has no recorded parent.
    """
    return path_from_parents(parents, goal)


class WeightedGraph(Generic[V, W]):
    """A graph whose edges carry weights, stored as nested mappings."""

    def __init__(self) -> None:
        self._adjacency: dict[V, dict[V, W]] = {}

    def add_vertex(self, vertex: V) -> None:
        """Add *vertex* if it is not already present."""
        self._adjacency.setdefault(vertex, {})

    def add_edge(
        self, from_vertex: V, to_vertex: V, weight: W, bidirectional: bool = True
    ) -> None:
        """Add a weighted edge, adding either end as a vertex if it is missing.

        Adding an edge that already exists replaces its weight.
        """
        self.add_vertex(from_vertex)
        self.add_vertex(to_vertex)
        self._adjacency[from_vertex][to_vertex] = weight
        if bidirectional:
            self._adjacency[to_vertex][from_vertex] = weight

    def neighbors_with_weights(self, vertex: V) -> list[tuple[V, W]]:
        """Return ``(neighbour, weight)`` pairs for the edges leaving *vertex*.

        Raises KeyError if *vertex* is not in the graph.
        """
        if vertex not in self._adjacency:
            raise KeyError(vertex)
        return list(self._adjacency[vertex].items())

    def edge_exists(self, from_vertex: V, to_vertex: V) -> bool:
        """Whether there is an edge from *from_vertex* to *to_vertex*."""
        return to_vertex in self._adjacency.get(from_vertex, {})

    def dijkstra(self, start: V) -> tuple[dict[V, V], dict[V, W]]:
        """Find shortest paths from *start* to every reachable vertex.

        Returns ``(parents, weights)``: how each vertex was reached, with
        *start* as its own parent, and the total weight of the shortest path
        to each vertex. Unreachable vertices appear in neither mapping.
        Raises KeyError if *start* is not in the graph.
        """
        parents: dict[V, V] = {start: start}
        weights: dict[V, W] = {start: 0}
        tiebreak = count()
        frontier: list[tuple[W, int, V]] = [(0, next(tiebreak), start)]

        while frontier:
            cost, _, current = heapq.heappop(frontier)
            if cost > weights[current]:
                continue
            for neighbor, weight in self.neighbors_with_weights(current):
                new_cost = weights[current] + weight
                if neighbor not in weights or new_cost < weights[neighbor]:
                    parents[neighbor] = current
                    weights[neighbor] = new_cost
                    heapq.heappush(frontier, (new_cost, next(tiebreak), neighbor))

        return parents, weights

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex}: " + "".join(f"({to} {weight}), " for to, weight in edges.items())
            for vertex, edges in self._adjacency.items()
        )