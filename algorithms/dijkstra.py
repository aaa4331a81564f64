"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Stepwise Dijkstra over a sorted list instead of a heap, so the whole
priority queue can be shown in order at every step.

Each step():
  1. Pop entries from the front until one names an unsettled node
     (stale entries are dropped silently, several per call if needed)
  2. Nothing usable left  →  FINISHED
  3. Settle the node, highlight the edge from its predecessor
  4. Relax every unsettled neighbour; an improvement updates distance and
     predecessor and inserts a NEW queue entry.  The neighbour's older
     entry stays behind and is filtered out later by the settled check.

Ties between equal distances pop in insertion order.

Correctness note: Dijkstra requires non-negative weights.  Generated
weights are always in [1, 9].
"""

import math
from typing import Dict, List, NamedTuple, Optional

from graph import Graph, WeightedNeighbour, build_weighted_adjacency
from algorithms.base import TraversalState, sorted_insert

INF = math.inf


class QueueEntry(NamedTuple):
    id:   int
    dist: float


class DijkstraState(TraversalState):
    """
    Attributes:
        distances : {node_id: best known distance}, INF until reached.
        previous  : {node_id: predecessor on the best known path}.
        queue     : [QueueEntry] sorted ascending by dist.
        adjacency : weighted adjacency built at start.

    `visited` holds the settled nodes; `settled` is an alias.
    """

    key   = "dijkstra"
    label = "Dijkstra"
    short = "Dijkstra"

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.distances: Dict[int, float]                   = {nid: INF for nid in graph.node_ids()}
        self.previous:  Dict[int, int]                     = {}
        self.queue:     List[QueueEntry]                   = []
        self.adjacency: Dict[int, List[WeightedNeighbour]] = build_weighted_adjacency(graph)

    @property
    def settled(self):
        return self.visited

    @classmethod
    def start(cls, graph: Graph) -> "DijkstraState":
        state = cls(graph)
        source = graph.start_node()
        state.distances[source] = 0
        state.queue.append(QueueEntry(source, 0))
        state.message = f"Starting Dijkstra from {graph.label_of(source)}."
        return state

    def distance_map(self) -> Dict[int, float]:
        return dict(self.distances)

    def _advance(self) -> str:
        entry = self._pop_unsettled()
        if entry is None:
            self.finished = True
            self.current_node = None
            return "Dijkstra complete."

        node = entry.id
        self._mark_visited(node)
        if node in self.previous:
            self._traverse(self.previous[node], node)

        updated = []
        for nbr in self.adjacency.get(node, []):
            if nbr.to in self.visited:
                continue
            candidate = self.distances[node] + nbr.weight
            if candidate < self.distances[nbr.to]:
                self.distances[nbr.to] = candidate
                self.previous[nbr.to] = node
                sorted_insert(self.queue, QueueEntry(nbr.to, candidate), key=lambda e: e.dist)
                updated.append(self._label(nbr.to))

        msg = f"Settled {self._label(node)} at distance {_fmt(self.distances[node])}."
        if updated:
            msg += f" Updated {', '.join(updated)}."
        return msg

    def _pop_unsettled(self) -> Optional[QueueEntry]:
        while self.queue:
            entry = self.queue.pop(0)
            if entry.id not in self.visited:
                return entry
        return None


def _fmt(value: float) -> str:
    return "∞" if value == INF else str(int(value))
