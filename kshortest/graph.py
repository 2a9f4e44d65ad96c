import logging
import math
from typing import Iterable, List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

INF = math.inf


class Edge(NamedTuple):
    weight: float
    source: int
    target: int


class Vertex:
    """
    One vertex of the graph, addressed by its index in Graph.vertices.

    forwards / backwards hold indices into Graph.edges (outgoing / incoming).
    shortest_path is the distance to the preprocessed destination (INF until set)
    and queue_slot is the heap slot while the vertex sits in an indexed queue.
    """

    __slots__ = ("forwards", "backwards", "shortest_path", "queue_slot")

    def __init__(self):
        self.forwards: List[int] = []
        self.backwards: List[int] = []
        self.shortest_path = INF
        self.queue_slot: Optional[int] = None

    def __repr__(self):
        return (f"Vertex(out={len(self.forwards)}, in={len(self.backwards)}, "
                f"shortest_path={self.shortest_path})")


class Graph:
    """Immutable directed graph stored as flat vertex / edge arrays."""

    def __init__(self, vertices, edges):
        self.vertices: List[Vertex] = vertices
        self.edges: List[Edge] = edges
        # destination the shortest_path fields were computed for
        self.heuristic_destination: Optional[int] = None

    @classmethod
    def load(cls, vertex_count: int, edge_list: Iterable[Tuple[int, int, float]]) -> "Graph":
        # no validation here, see graph_reader for checked input
        vertices = [Vertex() for _ in range(vertex_count)]
        edges = []
        for source, target, weight in edge_list:
            index = len(edges)
            edges.append(Edge(float(weight), source, target))
            vertices[source].forwards.append(index)
            vertices[target].backwards.append(index)

        logger.debug("Loaded graph with %d vertices and %d edges", len(vertices), len(edges))
        return cls(vertices, edges)

    @property
    def num_vertices(self):
        return len(self.vertices)

    @property
    def num_edges(self):
        return len(self.edges)

    def out_edges(self, vertex):
        return [self.edges[i] for i in self.vertices[vertex].forwards]

    def in_edges(self, vertex):
        return [self.edges[i] for i in self.vertices[vertex].backwards]

    def shortest_paths(self):
        return [v.shortest_path for v in self.vertices]

    def reset_search_state(self):
        for vertex in self.vertices:
            vertex.shortest_path = INF
            vertex.queue_slot = None
        self.heuristic_destination = None

    def __repr__(self):
        return f"Graph(num_vertices={self.num_vertices}, num_edges={self.num_edges})"
