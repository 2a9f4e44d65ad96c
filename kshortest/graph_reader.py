"""
Reader for the whitespace separated graph format:

    <num_vertices> <num_edges>
    <from> <to> <weight>        (num_edges lines)
    <source> <destination> <k>

Every check runs before a Graph is built, so bad input never reaches the
search phases.
"""

import logging
import math
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple

from kshortest.exceptions import InvalidGraphError, NegativeWeightError
from kshortest.graph import Graph

logger = logging.getLogger(__name__)


class Query(NamedTuple):
    source: int
    destination: int
    k: int


class GraphInput(NamedTuple):
    vertex_count: int
    edges: List[Tuple[int, int, float]]
    query: Optional[Query]
    # weight tokens exactly as written, for rewriting the file
    weight_texts: List[str]


class _Tokens:

    def __init__(self, text):
        self._tokens = text.split()
        self._pos = 0

    def remaining(self):
        return len(self._tokens) - self._pos

    def next(self, what):
        if self._pos >= len(self._tokens):
            raise InvalidGraphError(f"unexpected end of input while reading {what}")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def next_int(self, what):
        token = self.next(what)
        try:
            value = int(token)
        except ValueError:
            raise InvalidGraphError(f"{what}: expected an integer, got {token!r}") from None
        if value < 0:
            raise InvalidGraphError(f"{what}: expected a non-negative integer, got {value}")
        return value


def _to_float(token, what):
    try:
        return float(token)
    except ValueError:
        raise InvalidGraphError(f"{what}: expected a number, got {token!r}") from None


def check_weight(weight, what="weight"):
    if math.isnan(weight) or math.isinf(weight):
        raise InvalidGraphError(f"{what}: weight must be finite, got {weight}")
    if weight < 0:
        raise NegativeWeightError(f"{what}: weight must be non-negative, got {weight}")
    return float(weight)


def validate_edges(vertex_count, edges):
    """Return edges as (int, int, float) triples or raise InvalidGraphError."""
    checked = []
    for i, (source, target, weight) in enumerate(edges):
        for name, vertex in (("from", source), ("to", target)):
            if not 0 <= vertex < vertex_count:
                raise InvalidGraphError(
                    f"edge {i}: {name} vertex {vertex} out of range [0, {vertex_count})")
        checked.append((int(source), int(target), check_weight(float(weight), f"edge {i}")))
    return checked


def parse_graph_input(text, require_query=True):
    tokens = _Tokens(text)
    vertex_count = tokens.next_int("number of vertices")
    edge_count = tokens.next_int("number of edges")

    edges = []
    weight_texts = []
    for i in range(edge_count):
        source = tokens.next_int(f"edge {i} from")
        target = tokens.next_int(f"edge {i} to")
        weight_text = tokens.next(f"edge {i} weight")
        edges.append((source, target, _to_float(weight_text, f"edge {i} weight")))
        weight_texts.append(weight_text)
    edges = validate_edges(vertex_count, edges)

    query = None
    if require_query or tokens.remaining():
        source = tokens.next_int("source")
        destination = tokens.next_int("destination")
        k = tokens.next_int("k")
        for name, vertex in (("source", source), ("destination", destination)):
            if vertex >= vertex_count:
                raise InvalidGraphError(f"{name} {vertex} out of range [0, {vertex_count})")
        if k < 1:
            raise InvalidGraphError(f"k must be at least 1, got {k}")
        query = Query(source, destination, k)

    if tokens.remaining():
        raise InvalidGraphError(f"{tokens.remaining()} unexpected trailing token(s)")
    return GraphInput(vertex_count, edges, query, weight_texts)


def parse_graph(text):
    """Parse the full format and return (Graph, Query)."""
    data = parse_graph_input(text)
    return Graph.load(data.vertex_count, data.edges), data.query


def read_graph(path):
    text = Path(path).read_text(encoding="utf-8")
    graph, query = parse_graph(text)
    logger.info("Read %r from %s", graph, path)
    return graph, query


def format_graph(vertex_count, edges, query=None):
    # weights may be floats or the original token strings
    lines = [f"{vertex_count} {len(edges)}"]
    lines.extend(f"{source} {target} {weight}" for source, target, weight in edges)
    if query is not None:
        lines.append(f"{query.source} {query.destination} {query.k}")
    return "\n".join(lines) + "\n"
