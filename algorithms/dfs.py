"""
dfs.py — Depth-First Search
=============================
Stepwise DFS using an explicit stack (last element = top).

Each step():
  1. Stack empty  →  FINISHED
  2. Pop the top node
  3. Already visited  →  skip (stale entry), nothing else happens
  4. Mark VISITED, highlight the edge from the node that discovered it
  5. Push unvisited, not-yet-pending neighbours in DESCENDING id order so
     they pop in ascending order

`stack_set` mirrors the stack contents so a node is never pending twice.
"""

from typing import Dict, List, Set

from graph import Graph, build_adjacency
from algorithms.base import TraversalState


class DFSState(TraversalState):
    """
    Attributes:
        stack     : pending node ids, last = top.
        stack_set : membership mirror of `stack`.
        parents   : {child: node that first discovered it}; never overwritten.
        adjacency : plain adjacency built at start.
    """

    key   = "dfs"
    label = "Depth-First Search"
    short = "DFS"

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.stack:     List[int]          = []
        self.stack_set: Set[int]           = set()
        self.parents:   Dict[int, int]     = {}
        self.adjacency: Dict[int, List[int]] = build_adjacency(graph)

    @classmethod
    def start(cls, graph: Graph) -> "DFSState":
        state = cls(graph)
        source = graph.start_node()
        state.stack.append(source)
        state.stack_set.add(source)
        state.message = f"Starting DFS from {graph.label_of(source)}."
        return state

    def _advance(self) -> str:
        if not self.stack:
            self.finished = True
            self.current_node = None
            return "DFS complete."

        node = self.stack.pop()
        self.stack_set.discard(node)

        if node in self.visited:
            return f"Skipping already visited {self._label(node)}."

        self._mark_visited(node)
        if node in self.parents:
            self._traverse(self.parents[node], node)

        for nbr in reversed(self.adjacency.get(node, [])):
            if nbr not in self.visited and nbr not in self.stack_set:
                self.stack.append(nbr)
                self.stack_set.add(nbr)
                self.parents.setdefault(nbr, node)

        return f"Visited {self._label(node)}."
