"""A weighted graph stored as edge lists, with Jarnik's minimum spanning tree."""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from itertools import count
from typing import Any, Generic, TypeVar

V = TypeVar("V", bound=Hashable)
W = TypeVar("W")


@dataclass(frozen=True, eq=True)
class WeightedEdge(Generic[V, W]):
    """A directed edge carrying a weight; edges order by weight alone."""

    from_vertex: V
    to_vertex: V
    weight: W

    def __lt__(self, other: WeightedEdge[Any, Any]) -> bool:
        return self.weight < other.weight

    def __gt__(self, other: WeightedEdge[Any, Any]) -> bool:
        return self.weight > other.weight


def total_weight(edges: Iterable[WeightedEdge[Any, Any]]) -> Any:
    """Sum of the weights of *edges*; 0 when there are none."""
    return sum(edge.weight for edge in edges)


class EdgeListGraph(Generic[V, W]):
    """A graph mapping each vertex to the list of weighted edges leaving it."""

    def __init__(self) -> None:
        self._adjacency: dict[V, list[WeightedEdge[V, W]]] = {}

    def add_vertex(self, vertex: V) -> None:
        """Add *vertex* if it is not already present."""
        self._adjacency.setdefault(vertex, [])

    def num_vertices(self) -> int:
        """How many vertices are in the graph."""
        return len(self._adjacency)

    def add_edge(
        self, from_vertex: V, to_vertex: V, weight: W, bidirectional: bool = True
    ) -> None:
        """Add a weighted edge, adding either end as a vertex if it is missing."""
        self.add_vertex(from_vertex)
        self.add_vertex(to_vertex)
        self._adjacency[from_vertex].append(WeightedEdge(from_vertex, to_vertex, weight))
        if bidirectional:
            self._adjacency[to_vertex].append(WeightedEdge(to_vertex, from_vertex, weight))

    def neighbors_with_weights(self, vertex: V) -> list[WeightedEdge[V, W]]:
        """Return the edges leaving *vertex*.

        Raises KeyError if *vertex* is not in the graph.
        """
        if vertex not in self._adjacency:
            raise KeyError(vertex)
        return list(self._adjacency[vertex])

    def edge_exists(self, from_vertex: V, to_vertex: V) -> bool:
        """Whether there is an edge from *from_vertex* to *to_vertex*."""
        return any(
            edge.to_vertex == to_vertex for edge in self._adjacency.get(from_vertex, ())
        )

    def mst(self, start: V) -> list[WeightedEdge[V, W]]:
        """Minimum spanning tree of the component holding *start* (Jarnik/Prim).

        Returns the tree's edges in the order they were chosen. Raises
        KeyError if *start* is not in the graph.
        """
        visited: set[V] = set()
        solution: list[WeightedEdge[V, W]] = []
        tiebreak = count()
        frontier: list[tuple[W, int, WeightedEdge[V, W]]] = []

        def visit(vertex: V) -> None:
            visited.add(vertex)
            for edge in self.neighbors_with_weights(vertex):
                if edge.to_vertex not in visited:
                    heapq.heappush(frontier, (edge.weight, next(tiebreak), edge))

        visit(start)
        while frontier:
            _, _, edge = heapq.heappop(frontier)
            if edge.to_vertex in visited:
                continue
            solution.append(edge)
            visit(edge.to_vertex)
        return solution

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex}: " + "".join(f"({e.to_vertex} {e.weight}), " for e in edges)
            for vertex, edges in self._adjacency.items()
        )