import itertools
import random

import networkx as nx
import pytest

from kshortest.exceptions import HeuristicMismatchError, InvalidGraphError
from kshortest.graph import Graph
from kshortest.network_builder import build_random_graph
from kshortest.path_check import verify_path
from kshortest.pathfinding.dijkstra import calculate_heuristic
from kshortest.pathfinding.k_shortest_paths import (
    iter_shortest_paths,
    k_shortest_path_costs,
    k_shortest_paths,
    search,
    top_k_shortest_paths,
)

graph = {
    'A': {'B': 2, 'C': 5},
    'B': {'C': 1, 'D': 4},
    'C': {'D': 2, 'E': 3},
    'D': {'F': 1},
    'E': {'F': 5},
    'F': {}
}


def test_top_k_on_demo_graph():
    paths = top_k_shortest_paths(graph, 'A', 'F', k=4)
    assert paths == [
        ['A', 'B', 'C', 'D', 'F'],
        ['A', 'B', 'D', 'F'],
        ['A', 'C', 'D', 'F'],
        ['A', 'B', 'C', 'E', 'F'],
    ]


def test_top_k_accepts_networkx_graph():
    G = nx.DiGraph()
    G.add_edge('x', 'y', weight=1)
    G.add_edge('y', 'z', weight=1)
    G.add_edge('x', 'z', weight=3)
    assert top_k_shortest_paths(G, 'x', 'z', k=5) == [['x', 'y', 'z'], ['x', 'z']]


def test_top_k_unknown_node_returns_empty():
    assert top_k_shortest_paths(graph, 'A', 'Z') == []


def test_four_vertex_scenario():
    g = Graph.load(4, [(0, 1, 1), (1, 3, 1), (0, 2, 5), (2, 3, 1)])
    assert k_shortest_path_costs(g, 0, 3, 2) == [2, 6]

    results = k_shortest_paths(g, 0, 3, 2)
    assert [r.vertices for r in results] == [(0, 1, 3), (0, 2, 3)]
    assert [r.edges for r in results] == [(0, 1), (2, 3)]


def test_disconnected_destination_gives_empty_result():
    g = Graph.load(4, [(0, 1, 1.0), (1, 0, 1.0), (1, 2, 1.0), (2, 1, 1.0)])
    assert k_shortest_path_costs(g, 0, 3, 3) == []


def test_fewer_paths_than_k():
    g = Graph.load(4, [(0, 1, 1), (1, 3, 1), (0, 2, 5), (2, 3, 1)])
    assert k_shortest_path_costs(g, 0, 3, 10) == [2, 6]


def test_source_equals_destination():
    g = Graph.load(3, [(0, 1, 1.0), (1, 0, 1.0), (1, 2, 1.0)])
    costs = k_shortest_path_costs(g, 1, 1, 5)
    assert costs[0] == 0.0
    assert costs == [0.0]


def test_parallel_edges_count_as_distinct_paths():
    g = Graph.load(3, [(0, 1, 1.0), (0, 1, 1.0), (1, 2, 2.0)])
    results = k_shortest_paths(g, 0, 2, 5)
    assert [r.cost for r in results] == [3.0, 3.0]
    assert {r.edges for r in results} == {(0, 2), (1, 2)}


def test_cycles_give_an_unbounded_sequence_of_walks():
    g = Graph.load(3, [(0, 1, 1.0), (1, 0, 1.0), (1, 2, 1.0)])
    assert k_shortest_path_costs(g, 0, 2, 5) == [2.0, 4.0, 6.0, 8.0, 10.0]


def test_iterator_is_lazy():
    g = Graph.load(2, [(0, 0, 1.0), (0, 1, 1.0)])
    calculate_heuristic(g, 1)
    walks = iter_shortest_paths(g, 0, 1)
    assert [next(walks).cost for _ in range(3)] == [1.0, 2.0, 3.0]


def _random_dag(seed, n=9, p=0.45):
    rnd = random.Random(seed)
    edges = [
        (u, v, float(rnd.randint(1, 9)))
        for u, v in itertools.combinations(range(n), 2)
        if rnd.random() < p
    ]
    return n, edges


@pytest.mark.parametrize("seed", range(6))
def test_matches_brute_force_enumeration_on_dags(seed):
    n, edges = _random_dag(seed)
    g = Graph.load(n, edges)
    G = nx.DiGraph()
    G.add_nodes_from(range(n))
    G.add_weighted_edges_from(edges)

    all_costs = sorted(
        nx.path_weight(G, path, 'weight')
        for path in nx.all_simple_paths(G, 0, n - 1)
    )
    k = 7
    assert k_shortest_path_costs(g, 0, n - 1, k) == all_costs[:k]


@pytest.mark.parametrize("seed", [21, 22, 23])
def test_costs_are_non_decreasing_and_paths_verify(seed):
    g = build_random_graph(60, 0.06, weight_range=(0.5, 10), integer_weights=False, seed=seed)
    results = k_shortest_paths(g, 0, 1, 25)
    for previous, current in zip(results, results[1:]):
        assert current.cost >= previous.cost
    for result in results:
        assert result.vertices[0] == 0 and result.vertices[-1] == 1
        verify_path(g, result)


def test_first_cost_is_the_shortest_distance():
    random_graph = build_random_graph(40, 0.1, seed=5)
    edges = [(e.source, e.target, e.weight) for e in random_graph.edges]
    edges.append((0, 3, 50.0))  # guarantees a 0 -> 3 path
    g = Graph.load(random_graph.num_vertices, edges)
    calculate_heuristic(g, 3)
    results = search(g, 0, 3, 1)
    assert len(results) == 1
    assert results[0].cost == g.vertices[0].shortest_path


def test_rounding_never_makes_costs_drop():
    # at 2**53 the spacing of floats is 2: the chain 0-1-2-3-4 sums forwards to
    # B but backwards to B + 4, so it leaves the queue after the direct B + 2 edge
    B = 2.0 ** 53
    g = Graph.load(5, [(0, 1, B), (1, 2, 1.0), (2, 3, 1.0), (3, 4, 1.0), (0, 4, B + 2)])
    results = k_shortest_paths(g, 0, 4, 2)
    assert [r.edges for r in results] == [(4,), (0, 1, 2, 3)]
    assert [r.cost for r in results] == [B + 2, B + 2]
    for result in results:
        verify_path(g, result)


def test_costs_never_drop_on_inexact_weights():
    weights = [0.1, 0.2, 0.3, 0.1 + 0.2, 1 / 3, 2 / 3, 0.7]
    for seed in range(300):
        rnd = random.Random(seed)
        n = 7
        edges = [
            (u, v, rnd.choice(weights))
            for u, v in itertools.combinations(range(n), 2)
            if rnd.random() < 0.6
        ]
        costs = k_shortest_path_costs(Graph.load(n, edges), 0, n - 1, 40)
        assert all(b >= a for a, b in zip(costs, costs[1:])), (seed, costs)


def test_costs_only_search_carries_no_paths():
    g = Graph.load(2, [(0, 1, 1.0)])
    calculate_heuristic(g, 1)
    (result,) = search(g, 0, 1, 1)
    assert result.vertices is None and result.edges is None


def test_search_requires_matching_preprocessing():
    g = Graph.load(3, [(0, 1, 1.0), (1, 2, 1.0)])
    calculate_heuristic(g, 2)
    with pytest.raises(HeuristicMismatchError):
        search(g, 0, 1, 1)


@pytest.mark.parametrize("source, destination, k", [(0, 9, 1), (-1, 1, 1), (0, 1, 0)])
def test_invalid_queries(source, destination, k):
    g = Graph.load(2, [(0, 1, 1.0)])
    with pytest.raises(InvalidGraphError):
        k_shortest_path_costs(g, source, destination, k)
