"""Analysis kernels: maximum-weight edges, subgraph extraction, betweenness."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from ssca2bench.graph import Graph
from ssca2bench.params import Parameters


class RandomStream(Protocol):
    """Anything that yields doubles in [0, 1)."""

    def next_double(self) -> float: ...


@dataclass(frozen=True)
class Edge:
    """One edge of the graph, with its index in the CSR arrays."""

    start_vertex: int
    end_vertex: int
    w: int
    e: int


def get_start_lists(graph: Graph) -> list[Edge]:
    """Return every edge carrying the maximum integer weight, in CSR order."""
    max_weight = -1
    found: list[Edge] = []
    for v in range(graph.n):
        for j, end, weight in graph.edges_of(v):
            if weight > max_weight:
                max_weight = weight
                found = [Edge(v, end, weight, j)]
            elif weight == max_weight:
                found.append(Edge(v, end, weight, j))
    return found


def find_subgraphs(
    graph: Graph, start_list: Iterable[Edge], path_length: int
) -> list[list[int]]:
    """Run a path-limited breadth-first search from each start edge.

    The search begins with both endpoints marked visited and expands from the
    end vertex for ``path_length`` phases. For each start edge the visited
    vertices are returned in discovery order.
    """
    results: list[list[int]] = []
    for edge in start_list:
        order = [edge.start_vertex, edge.end_vertex]
        visited = {edge.start_vertex, edge.end_vertex}
        phase_start, phase_end = 1, 2
        for _ in range(path_length):
            for v in order[phase_start:phase_end]:
                for _, w, _ in graph.edges_of(v):
                    if w != v and w not in visited:
                        visited.add(w)
                        order.append(w)
            phase_start, phase_end = phase_end, len(order)
        results.append(order)
    return results


def _permuted_sources(n: int, stream: RandomStream) -> list[int]:
    sources = list(range(n))
    for i in range(n):
        j = int(n * stream.next_double())
        if i != j:
            sources[i], sources[j] = sources[j], sources[i]
    return sources


def betweenness_centrality(
    graph: Graph, params: Parameters, stream: RandomStream
) -> list[float]:
    """Approximate betweenness centrality from ``2**params.k4approx`` sources.

    Sources are taken in a random order drawn from ``stream``; vertices with no
    out-edges are skipped. Unless ``params.torus`` is set, edges whose weight
    is divisible by 8 are ignored.
    """
    n = graph.n
    num_sources = 1 << params.k4approx
    use_filter = not params.torus
    bc = [0.0] * n

    traversals = 0
    for s in _permuted_sources(n, stream):
        if graph.num_edges[s + 1] == graph.num_edges[s]:
            continue
        traversals += 1
        if traversals == num_sources + 1:
            break

        dist = {s: 0}
        sigma = {s: 1.0}
        preds: dict[int, list[int]] = {s: []}
        phases: list[list[int]] = [[s]]
        while phases[-1]:
            frontier: list[int] = []
            for v in phases[-1]:
                for _, w, weight in graph.edges_of(v):
                    if use_filter and weight & 7 == 0:
                        continue
                    if v == w:
                        continue
                    dw = dist.get(w)
                    if dw is None:
                        frontier.append(w)
                        dist[w] = dist[v] + 1
                        sigma[w] = sigma[v]
                        preds[w] = [v]
                    elif dw == dist[v] + 1:
                        sigma[w] += sigma[v]
                        preds[w].append(v)
            phases.append(frontier)

        delta = dict.fromkeys(dist, 0.0)
        for phase in reversed(phases[1:-1]):
            for w in phase:
                for v in preds[w]:
                    delta[v] += sigma[v] * (1 + delta[w]) / sigma[w]
                bc[w] += delta[w]
    return bc


def torus_expected_bc(scale: int) -> float:
    """Exact betweenness of every vertex of the 2D torus with ``2**scale`` vertices."""
    if scale % 2 == 0:
        return 0.5 * 2.0 ** (3 * scale // 2) - 2.0**scale + 1.0
    return 0.75 * 2.0 ** ((3 * scale - 1) // 2) - 2.0**scale + 1.0


def verify_torus_bc(bc: Iterable[float], scale: int) -> bool:
    """Check that every value rounds to the exact torus betweenness."""
    expected = torus_expected_bc(scale)
    return all(abs(value - expected) < 0.5 for value in bc)