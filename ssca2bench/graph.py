"""Compact adjacency (CSR) graph built from generated edge tuples."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class EdgeTuples:
    """Directed weighted edges as parallel lists, over vertices ``0..n-1``."""

    n: int
    start_vertex: list[int] = field(default_factory=list)
    end_vertex: list[int] = field(default_factory=list)
    weight: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not len(self.start_vertex) == len(self.end_vertex) == len(self.weight):
            raise ValueError("edge tuple lists must have the same length")

    @property
    def m(self) -> int:
        """Number of edges."""
        return len(self.start_vertex)


@dataclass
class Graph:
    """Graph in compressed sparse row form.

    The out-edges of vertex ``v`` occupy indices
    ``num_edges[v]`` to ``num_edges[v+1]`` of ``end_v`` and ``weight``.
    """

    n: int
    num_edges: list[int]
    end_v: list[int]
    weight: list[int]

    @property
    def m(self) -> int:
        """Number of edges."""
        return len(self.end_v)

    def edges_of(self, v: int) -> Iterator[tuple[int, int, int]]:
        """Yield ``(edge_index, end_vertex, weight)`` for each out-edge of ``v``."""
        if not 0 <= v < self.n:
            raise IndexError(f"vertex {v} out of range [0,{self.n})")
        for j in range(self.num_edges[v], self.num_edges[v + 1]):
            yield j, self.end_v[j], self.weight[j]


def compute_graph(tuples: EdgeTuples) -> Graph:
    """Group edges by start vertex, keeping their original relative order."""
    n = tuples.n
    degree = [0] * n
    positions = []
    for u in tuples.start_vertex:
        if not 0 <= u < n:
            raise ValueError(f"start vertex {u} out of range [0,{n})")
        positions.append(degree[u])
        degree[u] += 1
    for v in tuples.end_vertex:
        if not 0 <= v < n:
            raise ValueError(f"end vertex {v} out of range [0,{n})")

    num_edges = [0]
    for d in degree:
        num_edges.append(num_edges[-1] + d)

    m = tuples.m
    end_v = [0] * m
    weight = [0] * m
    for u, pos, v, w in zip(
        tuples.start_vertex, positions, tuples.end_vertex, tuples.weight
    ):
        j = num_edges[u] + pos
        end_v[j] = v
        weight[j] = w
    return Graph(n=n, num_edges=num_edges, end_v=end_v, weight=weight)