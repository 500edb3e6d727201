# ssca2bench

A graph analysis benchmark. It builds a synthetic graph and runs four
kernels over it:

1. **Graph construction**: `compute_graph` turns edge tuples (`EdgeTuples`)
   into a compressed sparse row `Graph`. Edges are grouped by start vertex
   and keep their original order.
2. **Maximum edge weight**: `get_start_lists` returns every edge (`Edge`)
   that carries the largest integer weight, in CSR order.
3. **Subgraph extraction**: `find_subgraphs` runs a breadth-first search of
   limited path length from each of those edges. For each edge it returns
   the visited vertices in the order they were found.
4. **Betweenness centrality**: `betweenness_centrality` gives an
   approximation from `2**k4approx` source vertices, taken in a random
   order. On an R-MAT graph, edges whose weight is divisible by 8 are
   ignored.

Input graphs come from two generators in `ssca2bench.generators`:

- `gen_scal_data` builds an R-MAT graph with permuted vertex ids and random
  integer weights.
- `gen_2d_torus` builds a 2D torus. Each vertex has four out-edges: down,
  up, left and right.

On a torus the betweenness of every vertex is known exactly
(`torus_expected_bc`), so `verify_torus_bc` can check the kernel's result.

`Parameters.from_scale(scale, torus)` derives the problem sizes from the
scale. A graph has `2**scale` vertices. It has `8 * n` edges, or `4 * n`
edges for a torus.

## Random numbers

Random numbers come from `ssca2bench.lcg.Lcg48`, a 48-bit linear congruential
generator with a prime addend. It needs no other library. It offers:

- `next_int`, `next_double` and `next_float`.
- `spawn(count, primes, registry)`, which creates further independent
  streams. The caller supplies the sequence of prime addends.
- `pack()`, which serialises a stream to bytes, and `Lcg48.unpack(data)`,
  which rebuilds it.
- `describe()`, a short readable summary of the stream.

`ssca2bench.lcg_arith` holds the 48-bit arithmetic: `add48`, `mul48`,
`bit_reverse`, and `advance_seed`, which jumps a stream ahead by 10^6 steps.
`ssca2bench.registry.GeneratorRegistry` tracks live streams by identity.
It raises `UnknownGeneratorError` for a handle that is not registered.
`ssca2bench.timing.cputime` returns the user plus system CPU seconds this
process has used.

## Installation

```
pip install .
```

## Command line

```
ssca2bench 10
ssca2bench 6 --torus
```

The first command generates an R-MAT graph at the given SCALE and runs every
kernel. The second uses a 2D torus and validates the betweenness result. It
exits with status 1 if validation fails.

Progress messages go to standard error.

## Library use

```python
import sys
from ssca2bench.cli import run_benchmark

result = run_benchmark(8, False, sys.stderr)
print(len(result.start_list), result.total_time)
```

The kernels can also be called one at a time:

```python
from ssca2bench.params import Parameters
from ssca2bench.lcg import Lcg48
from ssca2bench.generators import gen_scal_data
from ssca2bench.graph import compute_graph
from ssca2bench.kernels import get_start_lists, find_subgraphs

params = Parameters.from_scale(6, False)
tuples = gen_scal_data(params, Lcg48(0, 1, 2387, 0, 11863279))
graph = compute_graph(tuples)
start = get_start_lists(graph)
subgraphs = find_subgraphs(graph, start, params.subgraph_path_length)
```

## What it does not do

- Every kernel runs sequentially in one process. The command takes no thread
  count.
- The 48-bit LCG is the only random-number generator family provided.
- `spawn` needs the caller to supply the table of prime addends. The package
  ships no prime table.

## Running the tests

```
pip install .[test]
pytest
```