"""
adjacency.py — Adjacency Views
===============================
Derived, read-only neighbour lists.  Rebuilt every time a traversal
starts; traversal states never edit them.

Neighbour order is ascending id in both views, which is what makes
every state machine's tie-breaking deterministic.
"""

from typing import Dict, List, NamedTuple

from graph.graph import Graph


class WeightedNeighbour(NamedTuple):
    to:     int
    weight: int


Adjacency         = Dict[int, List[int]]
WeightedAdjacency = Dict[int, List[WeightedNeighbour]]


def build_adjacency(graph: Graph) -> Adjacency:
    """{node_id: [neighbour ids ascending]}"""
    adj: Adjacency = {nid: [] for nid in graph.node_ids()}
    for edge in graph.edges:
        adj.setdefault(edge.source, []).append(edge.target)
        adj.setdefault(edge.target, []).append(edge.source)
    for nbrs in adj.values():
        nbrs.sort()
    return adj


def build_weighted_adjacency(graph: Graph) -> WeightedAdjacency:
    """{node_id: [(to, weight) ascending by neighbour id]}"""
    adj: WeightedAdjacency = {nid: [] for nid in graph.node_ids()}
    for edge in graph.edges:
        adj.setdefault(edge.source, []).append(WeightedNeighbour(edge.target, edge.weight))
        adj.setdefault(edge.target, []).append(WeightedNeighbour(edge.source, edge.weight))
    for nbrs in adj.values():
        nbrs.sort(key=lambda n: n.to)
    return adj
