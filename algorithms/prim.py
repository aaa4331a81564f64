"""
prim.py — Prim's Minimum Spanning Tree
========================================
Grows one tree from the start node.  The priority queue holds candidate
edges (source inside the tree, target outside at insertion time) sorted
ascending by weight; equal weights pop first-in first-out.

Each step():
  1. Queue empty  →  FINISHED
  2. Pop the cheapest candidate
  3. Target already in the tree  →  discard, no tree edge this step
  4. Otherwise pull the target in, record the tree edge and queue every
     edge from it to a node still outside the tree

Candidates whose target joined the tree later are NOT pruned from the
queue; they stay visible until popped and discarded.
"""

from typing import Dict, List

from graph import Edge, Graph, WeightedNeighbour, build_weighted_adjacency
from algorithms.base import TraversalState, sorted_insert


class PrimState(TraversalState):
    """
    Attributes:
        queue     : [Edge] candidate edges, ascending by weight.
        adjacency : weighted adjacency built at start.
    """

    key   = "prim"
    label = "Prim's MST"
    short = "Prim"

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.queue:     List[Edge]                         = []
        self.adjacency: Dict[int, List[WeightedNeighbour]] = build_weighted_adjacency(graph)

    @classmethod
    def start(cls, graph: Graph) -> "PrimState":
        state = cls(graph)
        source = graph.start_node()
        state._mark_visited(source)
        state._enqueue_from(source)
        state.message = f"Starting Prim from {graph.label_of(source)}."
        return state

    def _advance(self) -> str:
        if not self.queue:
            self.finished = True
            self.current_node = None
            return f"Prim complete. MST weight {self.tree_weight}."

        edge = self.queue.pop(0)
        name = self.graph.edge_label(edge.source, edge.target)

        if edge.target in self.visited:
            return f"Discarded {name} ({self._label(edge.target)} already in tree)."

        self._mark_visited(edge.target)
        self.tree_edges.add(edge.key)
        self._traverse(edge.source, edge.target)
        self._enqueue_from(edge.target)
        return f"Added {name} (weight {edge.weight}) to the tree."

    def _enqueue_from(self, node: int) -> None:
        for nbr in self.adjacency.get(node, []):
            if nbr.to not in self.visited:
                sorted_insert(self.queue, Edge(node, nbr.to, nbr.weight), key=lambda e: e.weight)
