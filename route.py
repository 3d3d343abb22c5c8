# route.py

import logging

import networkx as nx # type: ignore

from graph_utils import GraphError, copy_graph, graph_infinity, remove_vertex
from nodes import Node

logger = logging.getLogger(__name__)


class UnreachableTarget(GraphError):
    """No path leads from the source to the target."""

    def __init__(self, source, target, infinity):
        super().__init__(f"No route from {source.label} to {target.label}")
        self.source = source
        self.target = target
        self.distance = infinity


def relax_neighbors(G, distance, current):
    """Lower the tentative distance of every node reachable from current."""
    for _, neighbor, weight in G.out_edges(current, data="weight"):
        if distance[current] + weight < distance[neighbor]:
            distance[neighbor] = distance[current] + weight


def find_least(distance, visited, infinity):
    """Unvisited node with the smallest finite distance; ties keep the lowest index."""
    least = None
    base = infinity
    for node in Node:
        if node not in visited and distance[node] < base:
            base = distance[node]
            least = node
    return least


def find_route(G, current, target):
    """
    Dijkstra's algorithm from current to target.

    G is the working graph for this one search and loses edges as nodes are
    visited; a frozen base graph is copied first. Returns (distance, arrived)
    where arrived is the target node. Raises UnreachableTarget if the
    frontier runs dry before the target is found.
    """
    if current == target:
        return 0, target

    if nx.is_frozen(G):
        G = copy_graph(G)
    infinity = graph_infinity(G)
    distance = {node: infinity for node in Node}
    distance[current] = 0
    visited = set()
    source = current

    while current != target:
        relax_neighbors(G, distance, current)
        remove_vertex(G, current)
        visited.add(current)
        current = find_least(distance, visited, infinity)
        if current is None:
            raise UnreachableTarget(source, target, infinity)
        logger.debug("Adding node %s to potential path, with a current weight of %d",
                     current.label, distance[current])

    return distance[target], target
