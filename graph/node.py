from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Node State Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeState(Enum):
    UNVISITED = "unvisited"   # default blue
    PENDING   = "pending"     # sitting in the worklist
    VISITED   = "visited"     # settled / processed / in the tree
    CURRENT   = "current"     # the node touched by the latest step


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Immutable identity and placement.  Algorithm state never lives here,
    it belongs to the traversal state that is walking the graph.

    Attributes:
        id    : Integer id, 0..N-1 inside a generated graph.
        label : Human-readable name shown on the canvas (A, B, C, …).
        x, y  : Normalised position in [0, 1]; only the renderer reads it.
    """

    __slots__ = ("id", "label", "x", "y")

    def __init__(
        self,
        node_id: int,
        label: Optional[str] = None,
        x: float = 0.5,
        y: float = 0.5,
    ):
        self.id: int      = node_id
        self.label: str   = label or default_label(node_id)
        self.x: float     = x
        self.y: float     = y

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":    self.id,
            "label": self.label,
            "x":     self.x,
            "y":     self.y,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            node_id=int(data["id"]),
            label=data.get("label"),
            x=data.get("x", 0.5),
            y=data.get("y", 0.5),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def default_label(index: int) -> str:
    """A, B, … Z for the first 26 ids, the plain number after that."""
    if 0 <= index < 26:
        return chr(ord("A") + index)
    return str(index)
