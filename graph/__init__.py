"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import NodeState, EdgeState
    from graph import build_adjacency, build_weighted_adjacency
"""

from graph.node      import Node,  NodeState
from graph.edge      import Edge,  EdgeState, EdgeKey, edge_key
from graph.graph     import Graph, clamp_node_count
from graph.adjacency import (
    WeightedNeighbour,
    build_adjacency,
    build_weighted_adjacency,
)

__all__ = [
    "Node",      "NodeState",
    "Edge",      "EdgeState",
    "EdgeKey",   "edge_key",
    "Graph",     "clamp_node_count",
    "WeightedNeighbour",
    "build_adjacency",
    "build_weighted_adjacency",
]
