"""Command-line entry point that solves a TSP file with the chosen algorithm."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from tspsolve.graph import INF, Graph
from tspsolve.held_karp import held_karp_tour
from tspsolve.mst_approx import mst_approx_tour
from tspsolve.my_algo import my_algo_tour
from tspsolve.parser import Mode, TspParseError, UsageError, parse_args, parse_tsp_file

HELD_KARP_TIME_LIMIT_S = 3600.0


def _solve(mode: Mode, graph: Graph) -> tuple[int, list[int]]:
    try:
        if mode is Mode.MST:
            return mst_approx_tour(graph)
        if mode is Mode.HELD_KARP:
            return held_karp_tour(graph, HELD_KARP_TIME_LIMIT_S)
        return my_algo_tour(graph)
    except (ValueError, TimeoutError):
        return INF, []


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        mode, input_path = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        graph = parse_tsp_file(input_path)
    except TspParseError:
        print(f"Failed to parse TSP file: {input_path}", file=sys.stderr)
        return 1

    started = time.process_time()
    cost, tour = _solve(mode, graph)
    elapsed = time.process_time() - started

    print(f"Tour cost: {cost}")
    print("Tour sequence:" + "".join(f" {city}" for city in tour))
    print(f"Elapsed time: {elapsed:.3f} seconds")
    print()
    print("=== Final Summary ===")
    print(f"Final cost: {cost}")
    print(f"Total time: {elapsed:.3f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())