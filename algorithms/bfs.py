"""
bfs.py — Breadth-First Search
===============================
Same shape as DFS with a FIFO queue instead of a stack: pop from the
front, enqueue unvisited, not-yet-pending neighbours at the back in
ascending id order.
"""

from collections import deque
from typing import Deque, Dict, List, Set

from graph import Graph, build_adjacency
from algorithms.base import TraversalState


class BFSState(TraversalState):
    """
    Attributes:
        queue     : pending node ids, first = front.
        queue_set : membership mirror of `queue`.
        parents   : {child: node that first discovered it}.
        adjacency : plain adjacency built at start.
    """

    key   = "bfs"
    label = "Breadth-First Search"
    short = "BFS"

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.queue:     Deque[int]           = deque()
        self.queue_set: Set[int]             = set()
        self.parents:   Dict[int, int]       = {}
        self.adjacency: Dict[int, List[int]] = build_adjacency(graph)

    @classmethod
    def start(cls, graph: Graph) -> "BFSState":
        state = cls(graph)
        source = graph.start_node()
        state.queue.append(source)
        state.queue_set.add(source)
        state.message = f"Starting BFS from {graph.label_of(source)}."
        return state

    def _advance(self) -> str:
        if not self.queue:
            self.finished = True
            self.current_node = None
            return "BFS complete."

        node = self.queue.popleft()
        self.queue_set.discard(node)

        if node in self.visited:
            return f"Skipping already visited {self._label(node)}."

        self._mark_visited(node)
        if node in self.parents:
            self._traverse(self.parents[node], node)

        for nbr in self.adjacency.get(node, []):
            if nbr not in self.visited and nbr not in self.queue_set:
                self.queue.append(nbr)
                self.queue_set.add(nbr)
                self.parents.setdefault(nbr, node)

        return f"Visited {self._label(node)}."
