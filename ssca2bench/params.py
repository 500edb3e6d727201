"""Benchmark problem parameters derived from the scale."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Parameters:
    """Sizes and generator settings for one benchmark run."""

    scale: int
    n: int
    m: int
    a: float
    b: float
    c: float
    d: float
    max_int_weight: int
    subgraph_path_length: int
    k4approx: int
    torus: bool = False

    @classmethod
    def from_scale(cls, scale: int, torus: bool = False) -> "Parameters":
        """Build parameters for ``2**scale`` vertices.

        With ``torus`` set, the graph is a 2D torus with four edges per vertex
        and betweenness centrality is computed from every vertex.
        """
        if scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")
        n = 1 << scale
        b = 0.1
        return cls(
            scale=scale,
            n=n,
            m=(4 if torus else 8) * n,
            a=0.55,
            b=b,
            c=b,
            d=0.25,
            max_int_weight=1 << scale,
            subgraph_path_length=3,
            k4approx=scale if torus else min(scale, 10),
            torus=torus,
        )