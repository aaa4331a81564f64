"""
kruskal.py — Kruskal's Minimum Spanning Tree
==============================================
Considers every edge once, cheapest first (stable sort: equal weights
keep their order in the graph's edge list), and keeps an edge only when
its endpoints are in different components of a disjoint-set forest.

Each step():
  1. No edges left, or the tree already has N-1 edges  →  FINISHED
  2. Pop the cheapest remaining edge and mark it traversed
  3. Different roots  →  union the sets, accept the edge
     Same root        →  reject it, it would close a cycle
"""

from typing import Dict, Iterable, List

from graph import Edge, Graph
from algorithms.base import TraversalState


class DisjointSet:
    """
    Union-find over node ids with path compression and union by rank.

    Attributes:
        parent : {node_id: parent id}; roots point at themselves.
        rank   : {node_id: upper bound on tree height}.
    """

    def __init__(self, ids: Iterable[int]):
        self.parent: Dict[int, int] = {}
        self.rank:   Dict[int, int] = {}
        for nid in ids:
            self.parent[nid] = nid
            self.rank[nid] = 0

    def find(self, node: int) -> int:
        root = node
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[node] != root:
            nxt = self.parent[node]
            self.parent[node] = root
            node = nxt
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding a and b.  False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1
        return True


class KruskalState(TraversalState):
    """
    Attributes:
        remaining_edges : [Edge] not yet considered, ascending by weight.
        dsu             : DisjointSet over every node id.
    """

    key   = "kruskal"
    label = "Kruskal's MST"
    short = "Kruskal"

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.remaining_edges: List[Edge] = sorted(graph.edges, key=lambda e: e.weight)
        self.dsu:             DisjointSet = DisjointSet(graph.node_ids())

    @property
    def parent(self) -> Dict[int, int]:
        return self.dsu.parent

    @property
    def rank(self) -> Dict[int, int]:
        return self.dsu.rank

    @classmethod
    def start(cls, graph: Graph) -> "KruskalState":
        state = cls(graph)
        state.message = (
            f"Starting Kruskal with {len(state.remaining_edges)} edges sorted by weight."
        )
        return state

    def _advance(self) -> str:
        target_size = max(self.graph.node_count() - 1, 0)
        if not self.remaining_edges or len(self.tree_edges) >= target_size:
            self.finished = True
            self.current_node = None
            return f"Kruskal complete. MST weight {self.tree_weight}."

        edge = self.remaining_edges.pop(0)
        name = self.graph.edge_label(edge.source, edge.target)
        self._traverse(edge.source, edge.target)

        if self.dsu.union(edge.source, edge.target):
            self.tree_edges.add(edge.key)
            self._mark_visited(edge.source)
            self._mark_visited(edge.target)
            return f"Added {name} (weight {edge.weight}) to the tree."

        self.current_node = None
        return f"Rejected {name}: it would form a cycle."
