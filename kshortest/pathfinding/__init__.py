from kshortest.pathfinding.dijkstra import calculate_heuristic
from kshortest.pathfinding.indexed_queue import HeapElement, IndexedPriorityQueue
from kshortest.pathfinding.k_shortest_paths import (
    PathResult,
    iter_shortest_paths,
    k_shortest_path_costs,
    k_shortest_paths,
    search,
    top_k_shortest_paths,
)
