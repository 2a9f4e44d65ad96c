import logging
import os

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.lines import Line2D

from kshortest.network_builder import build_random_graph
from kshortest.pathfinding.k_shortest_paths import k_shortest_paths

logger = logging.getLogger(__name__)

PATH_COLORS = ['red', 'darkorange', 'green', 'purple', 'brown', 'magenta']


def _simple_digraph(graph):
    # one drawable edge per ordered pair, labelled with the cheapest weight
    G = nx.DiGraph()
    G.add_nodes_from(range(graph.num_vertices))
    for edge in graph.edges:
        if G.has_edge(edge.source, edge.target):
            if edge.weight >= G[edge.source][edge.target]['weight']:
                continue
        G.add_edge(edge.source, edge.target, weight=edge.weight)
    return G


def draw_graph_with_paths(graph, results, output_link="plots/k_shortest_paths.png", layout="spring"):
    """Save a picture of the graph with every path in `results` highlighted."""
    G = _simple_digraph(graph)
    if layout == "kamada":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    else:
        pos = nx.spring_layout(G, seed=42, k=2.0)

    plt.figure(figsize=(10, 8))

    # unreachable vertices (no route to the destination) are drawn grey
    node_colors = [
        '#A0CBE2' if graph.vertices[n].shortest_path != float('inf') else '#CCCCCC'
        for n in G.nodes()
    ]
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=500)
    nx.draw_networkx_labels(G, pos, font_size=9)
    nx.draw_networkx_edges(G, pos, arrows=True, arrowstyle='->', width=1.0, arrowsize=12)
    edge_labels = nx.get_edge_attributes(G, 'weight')
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=8)

    legend_elements = []
    for rank, result in enumerate(results):
        if result.vertices is None or len(result.vertices) < 2:
            continue
        color = PATH_COLORS[rank % len(PATH_COLORS)]
        path_edges = list(zip(result.vertices, result.vertices[1:]))
        nx.draw_networkx_edges(
            G, pos, edgelist=path_edges,
            width=3.0, edge_color=color,
            arrows=True, arrowstyle='->', arrowsize=16
        )
        legend_elements.append(
            Line2D([0], [0], color=color, lw=3, label=f"#{rank + 1} cost {result.cost:g}"))

    if legend_elements:
        plt.legend(handles=legend_elements, loc='upper left', frameon=True)

    plt.title("Graph with k shortest paths", fontsize=12)
    plt.tight_layout()
    directory = os.path.dirname(output_link)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(output_link)
    plt.close()
    logger.info("Saved %s", output_link)
    return output_link


if __name__ == "__main__":
    graph = build_random_graph(n_vertices=12, edge_prob=0.25, seed=7)
    results = k_shortest_paths(graph, 0, graph.num_vertices - 1, k=3)
    if results:
        draw_graph_with_paths(graph, results)
    else:
        print("No path between the chosen vertices.")
