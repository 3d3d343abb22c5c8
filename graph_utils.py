# graph_utils.py

import logging
import os

import networkx as nx # type: ignore

from nodes import Node, UnknownNodeLabel

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "graphWeights")
EDGE_COUNT = 18


class GraphError(Exception):
    """Base class for maze graph errors."""


class GraphLoadError(GraphError):
    """The graph definition could not be opened or read."""

    def __init__(self, path, reason):
        super().__init__(f"Failed to load graph from {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedGraphRecord(GraphError):
    """A record in the graph definition is not (label, label, weight)."""

    def __init__(self, record_number, message):
        super().__init__(f"Record {record_number}: {message}")
        self.record_number = record_number


def parse_records(text):
    """
    Split whitespace-delimited graph text into (source, destination, weight)
    records. Records do not have to sit on their own line.
    """
    tokens = text.split()
    records = []
    for start in range(0, len(tokens), 3):
        number = start // 3 + 1
        fields = tokens[start:start + 3]
        if len(fields) < 3:
            raise MalformedGraphRecord(number, f"file ends mid-record ({' '.join(fields)!r})")
        src_label, dst_label, weight_text = fields
        try:
            src = Node.from_label(src_label)
            dst = Node.from_label(dst_label)
        except UnknownNodeLabel as e:
            raise MalformedGraphRecord(number, str(e)) from None
        try:
            weight = int(weight_text)
        except ValueError:
            raise MalformedGraphRecord(number, f"weight {weight_text!r} is not an integer") from None
        if weight < 0:
            raise MalformedGraphRecord(number, f"weight {weight} is negative")
        records.append((src, dst, weight))
    return records


def build_graph(records):
    """Build the frozen base graph. Every maze node is present even without edges."""
    G = nx.DiGraph()
    G.add_nodes_from(Node)
    for src, dst, weight in records:
        G.add_edge(src, dst, weight=weight)
    return nx.freeze(G)


def load_graph(path=DEFAULT_GRAPH_FILE, edge_count=EDGE_COUNT):
    """
    Load the base graph from a graph definition file.

    Raises GraphLoadError when the file cannot be read and
    MalformedGraphRecord when its contents do not parse. Pass
    edge_count=None to accept any number of records.
    """
    try:
        with open(path) as f:
            text = f.read()
    except OSError as e:
        logger.error("Failed to load graph from %s: %s", path, e)
        raise GraphLoadError(path, e) from e

    records = parse_records(text)
    if edge_count is not None and len(records) != edge_count:
        raise MalformedGraphRecord(
            min(len(records), edge_count) + 1,
            f"expected {edge_count} records, found {len(records)}",
        )

    G = build_graph(records)
    logger.info("Loaded graph from %s with %d edges", path, G.number_of_edges())
    return G


def copy_graph(base):
    """Fresh mutable working copy of the base graph."""
    return nx.DiGraph(base)


def remove_vertex(G, node):
    """Drop every edge that terminates at node so it cannot be reached again."""
    G.remove_edges_from(list(G.in_edges(node)))


def graph_infinity(G):
    """A distance larger than any path in G: one more than the sum of all weights."""
    return sum(w for _, _, w in G.edges(data="weight", default=0)) + 1
