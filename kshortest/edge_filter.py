"""
Drop parallel edges (same ordered from/to pair) from a graph file, keeping
the first occurrence, and write the file back with a corrected edge count.
"""

import argparse
import logging
import sys
from pathlib import Path

from kshortest.exceptions import KShortestPathsError
from kshortest.graph_reader import format_graph, parse_graph_input
from kshortest.logging_config import setup_logging

logger = logging.getLogger(__name__)


def filter_duplicate_edges(edges):
    seen = set()
    kept = []
    for source, target, weight in edges:
        if (source, target) in seen:
            continue
        seen.add((source, target))
        kept.append((source, target, weight))
    return kept


def filter_edge_file(input_path, output_path):
    """Filter input_path into output_path and return the number of edges kept."""
    data = parse_graph_input(Path(input_path).read_text(encoding="utf-8"), require_query=False)
    raw_edges = [
        (source, target, text)
        for (source, target, _), text in zip(data.edges, data.weight_texts)
    ]
    kept = filter_duplicate_edges(raw_edges)
    Path(output_path).write_text(format_graph(data.vertex_count, kept, data.query), encoding="utf-8")
    logger.info("Kept %d of %d edges", len(kept), len(data.edges))
    return len(kept)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Remove parallel edges from a graph file.")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    setup_logging(args.log_level, use_rich=False)
    try:
        kept = filter_edge_file(args.input, args.output)
    except (KShortestPathsError, OSError) as e:
        logger.error("%s", e)
        return 1
    print(kept)
    return 0


if __name__ == "__main__":
    sys.exit(main())
