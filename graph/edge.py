"""
edge.py — Graph Edge
====================
Undirected, weighted connection between two node ids.

Design decisions:
  - `source` and `target` are node ids, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Weight is a positive integer; unweighted graphs use 1 everywhere.
  - Identity is the unordered pair (`key`).  A graph never holds two
    edges with the same key, so the key doubles as the edge id in the
    traversed / tree edge sets.
  - The same class is reused for Prim's candidate edges, where the
    orientation matters: `source` is inside the tree, `target` is the
    node the edge would pull in.
"""

from enum import Enum
from typing import Optional, Tuple


EdgeKey = Tuple[int, int]


# ---------------------------------------------------------------------------
# Edge State Enum — visual encoding for the renderer
# ---------------------------------------------------------------------------
class EdgeState(Enum):
    DEFAULT   = "default"     # thin, neutral grey
    TRAVERSED = "traversed"   # the algorithm walked / examined this edge
    TREE      = "tree"        # accepted into the spanning tree


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        source : id of one endpoint (the tail for candidate edges).
        target : id of the other endpoint.
        weight : positive integer cost.
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: int, target: int, weight: int = 1):
        self.source: int = source
        self.target: int = target
        self.weight: int = weight

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def key(self) -> EdgeKey:
        return edge_key(self.source, self.target)

    def connects(self, node_a: int, node_b: int) -> bool:
        """True if this edge links node_a ↔ node_b in either orientation."""
        return self.key == edge_key(node_a, node_b)

    def other_end(self, node_id: int) -> Optional[int]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=int(data["source"]),
            target=int(data["target"]),
            weight=int(data.get("weight", 1)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.key == other.key and self.weight == other.weight

    def __hash__(self) -> int:
        return hash((self.key, self.weight))


def edge_key(a: int, b: int) -> EdgeKey:
    """Orientation-free identity of the edge between a and b."""
    return (a, b) if a <= b else (b, a)
