import math

from kshortest.exceptions import PathMismatchError

COST_REL_TOL = 1e-9
COST_ABS_TOL = 1e-9


def path_cost(graph, edge_indices):
    # same summation order as the search
    total = 0.0
    for i in edge_indices:
        total += graph.edges[i].weight
    return total


def verify_path(graph, result, rel_tol=COST_REL_TOL, abs_tol=COST_ABS_TOL):
    """
    Check that a PathResult walks real edges and that its cost adds up.

    Returns the recomputed cost, raises PathMismatchError otherwise.
    """
    if result.vertices is None or result.edges is None:
        raise PathMismatchError("result carries no path, search with track_paths=True")
    if len(result.vertices) != len(result.edges) + 1:
        raise PathMismatchError(
            f"{len(result.vertices)} vertices do not match {len(result.edges)} edges")

    for position, edge_index in enumerate(result.edges):
        if not 0 <= edge_index < graph.num_edges:
            raise PathMismatchError(f"edge index {edge_index} does not exist")
        edge = graph.edges[edge_index]
        u, v = result.vertices[position], result.vertices[position + 1]
        if (edge.source, edge.target) != (u, v):
            raise PathMismatchError(
                f"edge {edge_index} is {edge.source}->{edge.target}, path step is {u}->{v}")

    total = path_cost(graph, result.edges)
    if not math.isclose(total, result.cost, rel_tol=rel_tol, abs_tol=abs_tol):
        raise PathMismatchError(f"path length {total} does not match reported cost {result.cost}")
    return total
