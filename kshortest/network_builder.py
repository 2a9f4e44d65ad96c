import logging

import networkx as nx
import numpy as np

from kshortest.graph import Graph
from kshortest.graph_reader import validate_edges

logger = logging.getLogger(__name__)


def graph_from_networkx(G, weight='weight', default_weight=1.0):
    """
    Convert a networkx graph into an index-addressed Graph.

    Returns (graph, index_of) where index_of maps node label -> vertex index
    in G.nodes order. Undirected edges become two directed edges and
    multigraph parallel edges are kept.
    """
    index_of = {node: i for i, node in enumerate(G.nodes())}
    edge_list = []
    for u, v, data in G.edges(data=True):
        w = data.get(weight, default_weight)
        edge_list.append((index_of[u], index_of[v], w))
        if not G.is_directed() and u != v:
            edge_list.append((index_of[v], index_of[u], w))

    edge_list = validate_edges(len(index_of), edge_list)
    return Graph.load(len(index_of), edge_list), index_of


def to_networkx(graph, labels=None):
    # MultiDiGraph so parallel edges survive the round trip
    G = nx.MultiDiGraph()
    names = labels if labels is not None else range(graph.num_vertices)
    names = list(names)
    for index, vertex in enumerate(graph.vertices):
        G.add_node(names[index], shortest_path=vertex.shortest_path)
    for edge in graph.edges:
        G.add_edge(names[edge.source], names[edge.target], weight=edge.weight)
    return G


def build_random_graph(n_vertices=15, edge_prob=0.3, weight_range=(1, 11), integer_weights=True, seed=None):
    """
    Random directed graph (Erdos-Renyi topology, numpy weights).

    Integer weights keep path costs exact, which makes results comparable
    across implementations.
    """
    G_temp = nx.gnp_random_graph(n_vertices, edge_prob, seed=seed, directed=True)
    rng = np.random.default_rng(seed)

    low, high = weight_range
    n_edges = G_temp.number_of_edges()
    if integer_weights:
        weights = rng.integers(low, high, size=n_edges, endpoint=True).astype(float)
    else:
        weights = rng.uniform(low, high, size=n_edges)

    edge_list = [
        (u, v, float(w))
        for (u, v), w in zip(G_temp.edges(), weights)
    ]
    graph = Graph.load(n_vertices, edge_list)
    logger.debug("Built random graph: %r (p=%s, seed=%s)", graph, edge_prob, seed)
    return graph
