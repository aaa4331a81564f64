"""
graph.py — Graph Container & Generator
=======================================
Single source of truth for the graph.  Traversal states and the renderer
both talk to this object.

Responsibilities:
  1. Id-based lookup of nodes & edges       (get_node / edge_between / label_of)
  2. Random connected-graph factory         (generate_random)
  3. Fixed-graph factory                    (from_edges)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - A Graph is built whole and never mutated afterwards.  Regenerating
    means building a new Graph, which in turn invalidates any traversal
    that was bound to the old one.
  - Nodes are kept in id order in a list, with a dict `_by_id` beside it
    for O(1) lookup.  Edges keep generation order, which Kruskal's stable
    sort relies on for tie-breaking.
  - Undirected: an edge is identified by its unordered endpoint pair and
    no pair ever appears twice.
"""

import logging
import math
import random
from typing import Dict, Iterable, List, Optional, Tuple, Union

import settings
from graph.node import Node
from graph.edge import Edge, EdgeKey, edge_key

logger = logging.getLogger(__name__)


class Graph:
    """
    Attributes:
        nodes        : [Node] in id order
        edges        : [Edge] in generation order
        show_weights : whether weights are meaningful / drawn
        _by_id       : {node_id: Node}
        _edge_index  : {(min_id, max_id): Edge}
    """

    def __init__(self, nodes: List[Node], edges: List[Edge], show_weights: bool = False):
        self.nodes:        List[Node]            = list(nodes)
        self.edges:        List[Edge]            = []
        self.show_weights: bool                  = show_weights
        self._by_id:       Dict[int, Node]       = {n.id: n for n in self.nodes}
        self._edge_index:  Dict[EdgeKey, Edge]   = {}

        for edge in edges:
            if edge.key in self._edge_index:
                continue
            self._edge_index[edge.key] = edge
            self.edges.append(edge)

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def get_node(self, node_id: int) -> Optional[Node]:
        return self._by_id.get(node_id)

    def label_of(self, node_id: int) -> str:
        """Display label, or the raw id when the node is unknown."""
        node = self._by_id.get(node_id)
        return node.label if node else str(node_id)

    def edge_label(self, a: int, b: int) -> str:
        return f"{self.label_of(a)}–{self.label_of(b)}"

    def edge_between(self, a: int, b: int) -> Optional[Edge]:
        return self._edge_index.get(edge_key(a, b))

    def has_edge(self, a: int, b: int) -> bool:
        return edge_key(a, b) in self._edge_index

    def node_ids(self) -> List[int]:
        return [n.id for n in self.nodes]

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def start_node(self) -> int:
        return self.nodes[0].id if self.nodes else 0

    def total_weight(self, keys: Iterable[EdgeKey]) -> int:
        total = 0
        for key in keys:
            edge = self._edge_index.get(key)
            if edge:
                total += edge.weight
        return total

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "show_weights": self.show_weights,
            "nodes":        [n.to_dict() for n in self.nodes],
            "edges":        [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        return cls(
            nodes=[Node.from_dict(nd) for nd in data.get("nodes", [])],
            edges=[Edge.from_dict(ed) for ed in data.get("edges", [])],
            show_weights=data.get("show_weights", False),
        )

    # ==================================================================
    # FACTORIES
    # ==================================================================

    # ---------- Fixed Graph ----------
    @classmethod
    def from_edges(
        cls,
        node_count: int,
        edges: Iterable[Tuple[int, int, int]],
        show_weights: bool = True,
    ) -> "Graph":
        """
        Build a graph from (a, b, weight) triples, nodes laid out on a circle.
        A repeated pair keeps its first weight.
        """
        nodes = [
            Node(i, x=_circle(i, node_count)[0], y=_circle(i, node_count)[1])
            for i in range(node_count)
        ]
        return cls(nodes, [Edge(a, b, w) for a, b, w in edges], show_weights=show_weights)

    # ---------- Random Graph ----------
    @classmethod
    def generate_random(
        cls,
        node_count: int = settings.DEFAULT_NODE_COUNT,
        edge_chance: float = 0.35,
        with_weights: bool = True,
        seed: Optional[int] = None,
    ) -> "Graph":
        """
        Random connected graph.

        A random recursive tree (node i hangs off a uniformly chosen
        earlier node) guarantees connectivity with N-1 edges, then every
        remaining pair i<j is added independently with `edge_chance`.
        """
        rng = random.Random(seed)
        node_count = clamp_node_count(node_count)

        nodes = []
        for i in range(node_count):
            x, y = _polar_position(rng, i, node_count)
            nodes.append(Node(i, x=x, y=y))

        edges: List[Edge] = []
        seen: set = set()

        # spanning-tree backbone
        for i in range(1, node_count):
            j = rng.randint(0, i - 1)
            edges.append(Edge(i, j, _random_weight(rng, with_weights)))
            seen.add(edge_key(i, j))

        # density
        for i in range(node_count):
            for j in range(i + 1, node_count):
                if rng.random() < edge_chance and edge_key(i, j) not in seen:
                    edges.append(Edge(i, j, _random_weight(rng, with_weights)))
                    seen.add(edge_key(i, j))

        g = cls(nodes, edges, show_weights=with_weights)
        logger.debug("Generated %r (edge_chance=%.2f, weights=%s)", g, edge_chance, with_weights)
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()}, weighted={self.show_weights})"


# ---------------------------------------------------------------------------
# Module helpers
# ---------------------------------------------------------------------------
def clamp_node_count(value: Union[int, float, str, None]) -> int:
    """Clamp to [MIN_NODES, MAX_NODES]; unparsable input gets the default."""
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        return settings.DEFAULT_NODE_COUNT
    return min(settings.MAX_NODES, max(settings.MIN_NODES, count))


def _random_weight(rng: random.Random, enabled: bool) -> int:
    return rng.randint(*settings.WEIGHT_RANGE) if enabled else 1


def _polar_position(rng: random.Random, index: int, total: int) -> Tuple[float, float]:
    # evenly around a circle with a little radius / position jitter
    angle  = 2 * math.pi * index / total
    radius = 0.38 + rng.random() * 0.08
    x = 0.5 + radius * math.cos(angle) + (rng.random() - 0.5) * 0.05
    y = 0.5 + radius * math.sin(angle) + (rng.random() - 0.5) * 0.05
    return min(0.9, max(0.1, x)), min(0.9, max(0.1, y))


def _circle(index: int, total: int) -> Tuple[float, float]:
    angle = 2 * math.pi * index / max(total, 1)
    return 0.5 + 0.4 * math.cos(angle), 0.5 + 0.4 * math.sin(angle)
