"""Command-line driver running the graph analysis benchmark end to end."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import TextIO

from ssca2bench.generators import gen_2d_torus, gen_scal_data
from ssca2bench.graph import Graph, compute_graph
from ssca2bench.kernels import (
    Edge,
    betweenness_centrality,
    find_subgraphs,
    get_start_lists,
    verify_torus_bc,
)
from ssca2bench.lcg import Lcg48
from ssca2bench.params import Parameters

SEED = 2387
_STREAM_PRIME = 11863279


def _new_stream() -> Lcg48:
    return Lcg48(0, 1, SEED, 0, _STREAM_PRIME)


@dataclass
class BenchmarkResult:
    """Outputs and timings of one benchmark run."""

    params: Parameters
    graph: Graph
    start_list: list[Edge]
    subgraphs: list[list[int]]
    bc: list[float]
    total_time: float
    validated: bool | None = None


def run_benchmark(
    scale: int, torus: bool = False, out: TextIO | None = None
) -> BenchmarkResult:
    """Run data generation and all four kernels, reporting progress to ``out``.

    With ``torus`` set, the input is a 2D torus and the betweenness result is
    checked against its exact value.
    """
    out = sys.stderr if out is None else out
    params = Parameters.from_scale(scale, torus)
    total_time = 0.0

    out.write("\nHPCS SSCA Graph Analysis Benchmark v2.2\n")
    out.write("Running...\n\n")
    out.write(f"SCALE: {scale}\n\n")

    if torus:
        out.write("Generating 2D torus for Kernel 4 validation -- ")
        out.write("gen2DTorus() beginning execution...\n")
        started = time.perf_counter()
        tuples = gen_2d_torus(params, _new_stream())
        elapsed = time.perf_counter() - started
        out.write("\n\tgen2DTorus() completed execution\n")
        out.write(f"\nTime taken for 2D torus generation is {elapsed:9.6f} sec.\n\n")
        total_time += elapsed
    else:
        out.write("Scalable Data Generator -- ")
        out.write("genScalData() beginning execution...\n")
        tuples = gen_scal_data(params, _new_stream())
        out.write("\n\tgenScalData() completed execution\n")

    out.write("\nKernel 1 -- computeGraph() beginning execution...\n")
    started = time.perf_counter()
    graph = compute_graph(tuples)
    total_time += time.perf_counter() - started
    out.write("\n\tcomputeGraph() completed execution\n")

    out.write("\nKernel 2 -- getStartLists() beginning execution...\n")
    started = time.perf_counter()
    start_list = get_start_lists(graph)
    total_time += time.perf_counter() - started
    out.write("\n\tgetStartLists() completed execution\n\n")
    out.write(f"Max. int wt. list size is {len(start_list)}\n")

    out.write("\nKernel 3 -- findSubGraphs() beginning execution...\n")
    started = time.perf_counter()
    subgraphs = find_subgraphs(graph, start_list, params.subgraph_path_length)
    total_time += time.perf_counter() - started
    for order in subgraphs:
        out.write(
            f"Search from <{order[0]}, {order[1]}>, number of vertices visited:"
            f" {len(order)}\n"
        )
    out.write("\n\tfindSubGraphs() completed execution\n")

    out.write("\nKernel 4 -- betweennessCentrality() beginning execution...\n")
    started = time.perf_counter()
    bc = betweenness_centrality(graph, params, _new_stream())
    total_time += time.perf_counter() - started

    validated = None
    if torus:
        validated = verify_torus_bc(bc, scale)
        if validated:
            out.write("Kernel 4 validation successful!\n")
        else:
            out.write("Kernel 4 failed validation!\n")

    return BenchmarkResult(
        params=params,
        graph=graph,
        start_list=start_list,
        subgraphs=subgraphs,
        bc=bc,
        total_time=total_time,
        validated=validated,
    )


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the benchmark; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="ssca2bench", description="HPCS SSCA graph analysis benchmark"
    )
    parser.add_argument("scale", type=int, help="log2 of the number of vertices")
    parser.add_argument(
        "--torus",
        action="store_true",
        help="use a 2D torus and validate betweenness centrality",
    )
    args = parser.parse_args(argv)
    if args.scale < 0:
        parser.error(f"scale must be non-negative, got {args.scale}")
    result = run_benchmark(args.scale, args.torus, sys.stderr)
    if result.validated is False:
        return 1
    return 0