# tspsolve

Solve Euclidean travelling salesman problems read from TSPLIB-style
files: a `DIMENSION: <n>` header line and a `NODE_COORD_SECTION`
followed by `n` entries of `id x y`, with ids from 1 to `n`. Distances
between cities are Euclidean, rounded to the nearest integer.

Three solvers are available:

- `mst` — preorder walk of a Prim minimum spanning tree, starting and
  ending at city 0.
- `held-karp` — exact dynamic programming over subsets, starting and
  ending at city 0; needs between 2 and 25 cities.
- `myalgo` — repeated nearest-neighbour construction from random start
  cities, each improved by 2-opt moves that exchange edges at most 5
  positions apart; the cheapest tour wins. Up to 5,000 cities it makes
  50 attempts, up to 20,000 it makes 30, and beyond that it keeps
  making attempts for 60 seconds of wall-clock time.

## Installation

```
pip install .
```

## Command line

```
tspsolve --mode mst --input cities.tsp
tspsolve --mode held-karp --input cities.tsp
tspsolve --mode myalgo --input cities.tsp
```

Exactly two option/value pairs are expected; `--input` is required and
`--mode` defaults to `mst`. Bad options, or an unreadable or malformed
file, print a message to standard error and exit with status 1.

The program prints the tour cost, the tour as zero-based city indices
(for `myalgo`, starting and ending at the chosen start city), the
processor time spent solving, and a final summary. With `held-karp` the
search is limited to one hour of processor time. If a solver cannot
produce a tour (for example `held-karp` on more than 25 cities, or the
time limit runs out) the cost printed is 2147483647 and the sequence is
empty.

A minimal input file:

```
NAME: square
DIMENSION: 4
NODE_COORD_SECTION
1 0 0
2 0 10
3 10 10
4 10 0
EOF
```

## Library use

```python
import random

from tspsolve.parser import parse_tsp_file
from tspsolve.mst_approx import mst_approx_tour
from tspsolve.held_karp import held_karp_tour
from tspsolve.my_algo import my_algo_tour

graph = parse_tsp_file("cities.tsp")

cost, tour = mst_approx_tour(graph)
cost, tour = held_karp_tour(graph, 60.0)
cost, tour = my_algo_tour(graph, random.Random(1))
```

Each solver returns `(cost, tour)`, where the tour lists `n + 1` cities
and returns to where it started.

- `parse_tsp_file` raises `TspParseError` (a `ValueError`) for a missing
  or malformed file; `parse_args` raises `UsageError` for bad options
  and returns a `Mode` and the input path.
- `mst_approx_tour` raises `ValueError` for an empty or disconnected
  graph.
- `held_karp_tour` raises `ValueError` for fewer than 2 or more than 25
  cities or when no tour exists, and `TimeoutError` when a positive
  `time_limit_s` of processor time is exceeded; the default `0.0` means
  no limit.
- `my_algo_tour` raises `ValueError` for an empty graph; without an
  `rng` it uses a fresh `random.Random()`.

A `Graph` can also be built by hand with `Graph(n)` and
`set_edge(u, v, w)`; `weight(u, v)` reads a weight back (`INF`,
2147483647, for cities out of range) and `xy(v)` gives a city's
coordinates.

## Limitations

Only two-dimensional coordinate files are read: other header fields
such as `EDGE_WEIGHT_TYPE` are ignored, and explicit weight matrices are
not supported. Tours are printed, not written to a file.