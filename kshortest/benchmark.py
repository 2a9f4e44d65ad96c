# timing runs over random graphs, one CSV row per query
import logging
import os
import random
import time

import pandas as pd

from kshortest.network_builder import build_random_graph
from kshortest.pathfinding.dijkstra import calculate_heuristic
from kshortest.pathfinding.k_shortest_paths import search

logger = logging.getLogger(__name__)

OUTPUT_FILE = "data/benchmark.csv"
N_GRAPHS = 20
QUERIES_PER_GRAPH = 5
K_PATHS = 10


def _ms(start, end):
    return 1000 * (end - start)


def run_benchmark(n_graphs=N_GRAPHS, queries_per_graph=QUERIES_PER_GRAPH, k=K_PATHS,
                  vertex_range=(200, 400), edge_prob=0.02, seed=None):
    """
    Time the three phases (build, preprocessing, search) on random graphs.
    Returns a DataFrame with one row per (graph, query).
    """
    rows = []
    rnd = random.Random(seed)
    for graph_idx in range(n_graphs):
        n_vertices = rnd.randint(*vertex_range)
        start_build = time.perf_counter()
        graph = build_random_graph(n_vertices, edge_prob, seed=rnd.randrange(2**32))
        end_build = time.perf_counter()

        for _ in range(queries_per_graph):
            src = rnd.randrange(n_vertices)
            dst = rnd.randrange(n_vertices)

            start_pre = time.perf_counter()
            settled = calculate_heuristic(graph, dst)
            end_pre = time.perf_counter()

            start_post = time.perf_counter()
            results = search(graph, src, dst, k)
            end_post = time.perf_counter()

            rows.append({
                "graph": graph_idx,
                "vertices": graph.num_vertices,
                "edges": graph.num_edges,
                "src": src,
                "dst": dst,
                "settled": settled,
                "paths_found": len(results),
                "shortest": results[0].cost if results else float("inf"),
                "build_ms": _ms(start_build, end_build),
                "preprocessing_ms": _ms(start_pre, end_pre),
                "search_ms": _ms(start_post, end_post),
            })

    df = pd.DataFrame(rows)
    if not df.empty:
        df["total_ms"] = df["build_ms"] + df["preprocessing_ms"] + df["search_ms"]
    return df


def save_benchmark(df, output_file=OUTPUT_FILE):
    directory = os.path.dirname(output_file)
    if directory:
        os.makedirs(directory, exist_ok=True)
    df.to_csv(output_file, index=False)
    logger.info("Benchmark with %d rows saved to %s", len(df), output_file)


if __name__ == "__main__":
    from kshortest.logging_config import setup_logging

    setup_logging("INFO")
    df = run_benchmark(seed=42)
    if df.empty:
        print("No benchmark rows produced.")
    else:
        save_benchmark(df)
        print(df[["preprocessing_ms", "search_ms", "total_ms"]].describe())
