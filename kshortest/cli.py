"""
Command line entry point: kshortest FILENAME

Reads a graph file, preprocesses distances to the destination, runs the
k-path search and prints the path costs followed by per-phase timings.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from kshortest.exceptions import KShortestPathsError
from kshortest.graph_reader import read_graph
from kshortest.logging_config import setup_logging
from kshortest.path_check import verify_path
from kshortest.pathfinding.dijkstra import calculate_heuristic
from kshortest.pathfinding.k_shortest_paths import search

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 10


def format_costs(costs, precision=DEFAULT_PRECISION):
    return ", ".join(format(cost, f".{precision}g") for cost in costs)


def _precision(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"precision must be at least 1, got {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="kshortest",
        description="Costs of the k shortest paths between two vertices of a weighted digraph.",
    )
    parser.add_argument("filename", type=Path, help="graph file: counts, edges, then 'source destination k'")
    parser.add_argument("--paths", action="store_true", help="also print the vertex sequence of each path")
    parser.add_argument("--check", action="store_true", help="verify each path against the graph edges")
    parser.add_argument("--timing", action=argparse.BooleanOptionalAction, default=True,
                        help="print per-phase elapsed time (default: on)")
    parser.add_argument("--precision", type=_precision, default=DEFAULT_PRECISION,
                        help="significant digits of printed costs")
    parser.add_argument("--plot", type=Path, default=None, help="save a picture of the paths to this file")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--plain-logs", action="store_true", help="plain log lines instead of rich output")
    return parser


def run(args, out=sys.stdout):
    start_build = time.perf_counter()
    graph, query = read_graph(args.filename)
    end_build = time.perf_counter()

    start_pre = time.perf_counter()
    calculate_heuristic(graph, query.destination)
    end_pre = time.perf_counter()

    track_paths = args.paths or args.check or args.plot is not None
    start_post = time.perf_counter()
    results = search(graph, query.source, query.destination, query.k, track_paths=track_paths)
    end_post = time.perf_counter()

    if args.check:
        for result in results:
            verify_path(graph, result)
        logger.info("All %d paths verified", len(results))

    if args.paths:
        for result in results:
            route = " -> ".join(str(v) for v in result.vertices)
            print(f"{format(result.cost, f'.{args.precision}g')}: {route}", file=out)
    print(format_costs([r.cost for r in results], args.precision), file=out)

    if args.timing:
        phases = [
            ("Building", end_build - start_build),
            ("Preprocessing", end_pre - start_pre),
            ("Searching", end_post - start_post),
        ]
        for name, seconds in phases:
            print(f"{name} time: {1000 * seconds} milliseconds.", file=out)
        print(f"Total time: {1000 * sum(s for _, s in phases)} milliseconds.", file=out)

    if args.plot is not None:
        from kshortest.visualize_network import draw_graph_with_paths

        draw_graph_with_paths(graph, results, str(args.plot))
    return results


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, use_rich=not args.plain_logs)
    try:
        run(args)
    except (KShortestPathsError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
