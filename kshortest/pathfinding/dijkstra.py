import logging
import math

from kshortest.exceptions import InvalidGraphError, NegativeWeightError
from kshortest.pathfinding.indexed_queue import IndexedPriorityQueue

logger = logging.getLogger(__name__)


def calculate_heuristic(graph, destination):
    """
    Reverse Dijkstra from `destination` over incoming edges.

    Sets vertices[v].shortest_path to the exact distance v -> destination
    (INF when the destination is unreachable) and returns the number of
    settled vertices. Edge weights must be non-negative.
    """
    vertices = graph.vertices
    edges = graph.edges
    if not 0 <= destination < len(vertices):
        raise InvalidGraphError(
            f"destination {destination} out of range [0, {len(vertices)})")

    graph.reset_search_state()
    settled = [False] * len(vertices)  # finalized vertices
    queue = IndexedPriorityQueue(vertices)

    vertices[destination].shortest_path = 0.0
    queue.push(destination, 0.0, 0.0)
    settled_count = 0

    while not queue.is_empty():
        element = queue.pop_min()
        node = element.vertex
        distance = element.path_cost
        settled[node] = True
        settled_count += 1

        for edge_index in vertices[node].backwards:
            edge = edges[edge_index]
            if edge.weight < 0 or math.isnan(edge.weight):
                raise NegativeWeightError(
                    f"edge {edge.source}->{edge.target} has invalid weight {edge.weight}")
            if settled[edge.source]:
                continue
            prev_vertex = vertices[edge.source]
            new_dist = distance + edge.weight
            if new_dist < prev_vertex.shortest_path:  # dv > du + w
                prev_vertex.shortest_path = new_dist
                if prev_vertex.queue_slot is None:
                    queue.push(edge.source, new_dist, new_dist)
                else:
                    queue.decrease(edge.source, new_dist, new_dist)

    graph.heuristic_destination = destination
    logger.debug("Reverse Dijkstra from %d settled %d of %d vertices",
                 destination, settled_count, len(vertices))
    return settled_count
