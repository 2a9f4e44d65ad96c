from kshortest.exceptions import (
    HeuristicMismatchError,
    InvalidGraphError,
    KShortestPathsError,
    NegativeWeightError,
    PathMismatchError,
    QueueInvariantError,
)
from kshortest.graph import Edge, Graph, Vertex
from kshortest.graph_reader import Query, parse_graph, read_graph
from kshortest.pathfinding import (
    IndexedPriorityQueue,
    PathResult,
    calculate_heuristic,
    k_shortest_path_costs,
    k_shortest_paths,
    search,
    top_k_shortest_paths,
)

__version__ = "0.1.0"
