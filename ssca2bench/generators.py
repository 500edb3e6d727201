"""Synthetic edge-list generators: recursive R-MAT graphs and 2D tori."""

from __future__ import annotations

from ssca2bench.graph import EdgeTuples
from ssca2bench.kernels import RandomStream
from ssca2bench.params import Parameters

_VARIATION = 0.1


def _quadrant(
    p: float, av: float, bv: float, cv: float, step: int, u: int, v: int
) -> tuple[int, int]:
    """Move ``(u, v)`` into the R-MAT quadrant selected by ``p``."""
    if p < av:
        return u, v
    if p < av + bv:
        return u, v + step
    if p < av + bv + cv:
        return u + step, v
    return u + step, v + step


def _rmat_edge(params: Parameters, stream: RandomStream) -> tuple[int, int]:
    u = v = 1
    step = params.n // 2
    av, bv, cv, dv = params.a, params.b, params.c, params.d

    u, v = _quadrant(stream.next_double(), av, bv, cv, step, u, v)
    for _ in range(1, params.scale):
        step //= 2
        # Vary a, b, c, d by up to 10 percent, then renormalise.
        av *= 0.95 + _VARIATION * stream.next_double()
        bv *= 0.95 + _VARIATION * stream.next_double()
        cv *= 0.95 + _VARIATION * stream.next_double()
        dv *= 0.95 + _VARIATION * stream.next_double()
        total = av + bv + cv + dv
        av, bv, cv, dv = av / total, bv / total, cv / total, dv / total
        u, v = _quadrant(stream.next_double(), av, bv, cv, step, u, v)
    return u - 1, v - 1


def _vertex_permutation(n: int, stream: RandomStream) -> list[int]:
    perm = list(range(n))
    for i in range(n):
        j = int(n * stream.next_double())
        if i != j:
            perm[i], perm[j] = perm[j], perm[i]
    return perm


def _weights(count: int, params: Parameters, stream: RandomStream) -> list[int]:
    return [int(1 + params.max_int_weight * stream.next_double()) for _ in range(count)]


def gen_scal_data(params: Parameters, stream: RandomStream) -> EdgeTuples:
    """Generate ``params.m`` R-MAT edges over ``params.n`` vertices.

    Vertex identifiers are randomly permuted after generation, and each edge
    receives an integer weight in ``[1, params.max_int_weight]``.
    """
    edges = [_rmat_edge(params, stream) for _ in range(params.m)]
    perm = _vertex_permutation(params.n, stream)
    start = [perm[u] for u, _ in edges]
    end = [perm[v] for _, v in edges]
    return EdgeTuples(
        n=params.n,
        start_vertex=start,
        end_vertex=end,
        weight=_weights(len(edges), params, stream),
    )


def _torus_shape(scale: int) -> tuple[int, int]:
    if scale % 2 == 0:
        side = 1 << (scale // 2)
        return side, side
    return 1 << ((scale + 1) // 2), 1 << ((scale - 1) // 2)


def gen_2d_torus(params: Parameters, stream: RandomStream) -> EdgeTuples:
    """Generate a 2D torus with four out-edges per vertex.

    Vertex ``y*i + j`` links down, up, left and right, in that order, with
    wrap-around at the borders. Weights are drawn from ``stream``.
    """
    x, y = _torus_shape(params.scale)
    start: list[int] = []
    end: list[int] = []
    for i in range(x):
        for j in range(y):
            vertex = y * i + j
            down = vertex - 1 if j > 0 else y * i + y - 1
            up = vertex + 1 if j < y - 1 else y * i
            left = y * (i - 1) + j if i > 0 else y * (x - 1) + j
            right = y * (i + 1) + j if i < x - 1 else j
            for target in (down, up, left, right):
                start.append(vertex)
                end.append(target)
    return EdgeTuples(
        n=x * y,
        start_vertex=start,
        end_vertex=end,
        weight=_weights(len(start), params, stream),
    )