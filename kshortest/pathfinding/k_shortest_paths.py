import logging
from heapq import heappop, heappush
from itertools import count, islice
from typing import NamedTuple, Optional, Tuple

import networkx as nx

from kshortest.exceptions import HeuristicMismatchError, InvalidGraphError
from kshortest.graph import INF
from kshortest.network_builder import graph_from_networkx
from kshortest.pathfinding.dijkstra import calculate_heuristic

logger = logging.getLogger(__name__)

# A* over an exact heuristic: the i-th time the destination leaves the queue
# is the i-th cheapest source -> destination walk.


class PathResult(NamedTuple):
    cost: float
    vertices: Optional[Tuple[int, ...]] = None
    edges: Optional[Tuple[int, ...]] = None


def _check_vertex(graph, vertex, name):
    if not 0 <= vertex < graph.num_vertices:
        raise InvalidGraphError(
            f"{name} {vertex} out of range [0, {graph.num_vertices})")


def _unwind(graph, source, trail):
    # trail is a linked list (edge_index, parent_trail) ending at the destination
    edge_indices = []
    while trail is not None:
        edge_index, trail = trail
        edge_indices.append(edge_index)
    edge_indices.reverse()
    path = [source]
    path.extend(graph.edges[i].target for i in edge_indices)
    return tuple(path), tuple(edge_indices)


def iter_shortest_paths(graph, source, destination, track_paths=False):
    """
    Lazily yield PathResult for source -> destination in non-decreasing cost.

    The graph must already be preprocessed for `destination`. A reported
    cost is never below the previous one, so under float rounding it may
    exceed the walk's re-summed cost by a few ulps. Walks that differ only
    by a parallel edge are yielded separately. The destination is
    never expanded, so a walk does not pass through it before its end.
    """
    _check_vertex(graph, source, "source")
    _check_vertex(graph, destination, "destination")
    if graph.heuristic_destination != destination:
        raise HeuristicMismatchError(
            f"graph is preprocessed for {graph.heuristic_destination}, not {destination}")

    vertices = graph.vertices
    edges = graph.edges
    start = vertices[source].shortest_path
    if start == INF:
        logger.warning("Destination %d is unreachable from %d", destination, source)
        return

    tie = count()
    queue = [(start, next(tie), source, 0.0, None)]
    last_cost = 0.0
    while queue:
        priority, _, node, path_cost, trail = heappop(queue)
        if node == destination:
            # rounding can leave a summed cost a few ulps under the previous one
            last_cost = max(path_cost, last_cost)
            if track_paths:
                path, edge_indices = _unwind(graph, source, trail)
                result = PathResult(last_cost, path, edge_indices)
            else:
                result = PathResult(last_cost)
            logger.debug("Path found with cost %s", last_cost)
            yield result
            continue

        for edge_index in vertices[node].forwards:
            edge = edges[edge_index]
            heuristic = vertices[edge.target].shortest_path
            if heuristic == INF:  # cannot reach the destination
                continue
            new_cost = path_cost + edge.weight
            # keep f monotone along a walk despite rounding in the heuristic
            new_priority = max(new_cost + heuristic, priority)
            heappush(queue, (
                new_priority,
                next(tie),
                edge.target,
                new_cost,
                (edge_index, trail) if track_paths else None,
            ))


def search(graph, source, destination, k, track_paths=False):
    """Return up to k PathResult, cheapest first. Fewer means fewer walks exist."""
    if k < 1:
        raise InvalidGraphError(f"k must be at least 1, got {k}")
    results = list(islice(iter_shortest_paths(graph, source, destination, track_paths), k))
    if len(results) < k:
        logger.warning("Found only %d of %d requested paths", len(results), k)
    return results


def _ensure_heuristic(graph, destination):
    if graph.heuristic_destination != destination:
        calculate_heuristic(graph, destination)


def k_shortest_paths(graph, source, destination, k):
    _ensure_heuristic(graph, destination)
    return search(graph, source, destination, k, track_paths=True)


def k_shortest_path_costs(graph, source, destination, k):
    """Costs of the k cheapest source -> destination walks, preprocessing if needed."""
    _ensure_heuristic(graph, destination)
    return [result.cost for result in search(graph, source, destination, k)]


def top_k_shortest_paths(graph, source, target, k=3, weight='weight'):
    # graph: dict-of-dicts {u: {v: w}} or a networkx graph with node labels
    if isinstance(graph, nx.Graph):
        G = graph
    else:
        G = nx.DiGraph()
        for u in graph:
            G.add_node(u)
            for v, w in graph[u].items():
                G.add_edge(u, v, weight=w)

    store, index_of = graph_from_networkx(G, weight=weight)
    if source not in index_of or target not in index_of:  # node doesnt exist
        return []
    labels = list(index_of)

    results = k_shortest_paths(store, index_of[source], index_of[target], k)
    return [[labels[v] for v in result.vertices] for result in results]
