"""
base.py — Traversal State
==========================
Shared shape of every stepwise algorithm.

A traversal state is created by `start(graph)`, mutated only by
`step()`, and becomes terminal once `finished` is set.  Each `step()`
performs exactly one unit of algorithmic work (or declares completion)
and returns a human-readable status message.

State machine:
    start()  →  READY
    READY / STEPPING  →  step()  →  STEPPING
    STEPPING  →  step() on exhausted worklist  →  FINISHED
    FINISHED  →  step()  →  FINISHED (no-op, message only)
"""

from typing import Callable, ClassVar, Dict, List, Optional, Set, TypeVar

from graph import Graph, EdgeKey, edge_key

T = TypeVar("T")

FINISHED_MESSAGE = "Traversal already finished."


class TraversalState:
    """
    Attributes:
        graph           : the Graph this state is bound to.
        visited         : node ids already processed / settled / in the tree.
        visit_order     : the same ids in the order they were visited.
        finished        : terminal flag.
        traversed_edges : edge keys the algorithm has walked (highlighting).
        tree_edges      : edge keys accepted into a spanning tree (MST only).
        current_node    : node touched by the latest step, if any.
        message         : status text from the latest start / step.
        steps_taken     : number of step() calls that did work.
    """

    key:   ClassVar[str] = ""
    label: ClassVar[str] = ""
    short: ClassVar[str] = ""

    def __init__(self, graph: Graph):
        self.graph:           Graph           = graph
        self.visited:         Set[int]        = set()
        self.visit_order:     List[int]       = []
        self.finished:        bool            = False
        self.traversed_edges: Set[EdgeKey]    = set()
        self.tree_edges:      Set[EdgeKey]    = set()
        self.current_node:    Optional[int]   = None
        self.message:         str             = ""
        self.steps_taken:     int             = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @classmethod
    def start(cls, graph: Graph) -> "TraversalState":
        raise NotImplementedError

    def step(self) -> str:
        """Advance one unit of work.  Never raises for a well-formed state."""
        if self.finished:
            self.message = FINISHED_MESSAGE
            return self.message
        self.steps_taken += 1
        self.message = self._advance()
        return self.message

    def _advance(self) -> str:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------
    def is_bound_to(self, graph: Optional[Graph]) -> bool:
        return graph is not None and self.graph is graph

    def _mark_visited(self, node_id: int) -> None:
        if node_id not in self.visited:
            self.visited.add(node_id)
            self.visit_order.append(node_id)
        self.current_node = node_id

    def _traverse(self, a: int, b: int) -> None:
        self.traversed_edges.add(edge_key(a, b))

    def _label(self, node_id: int) -> str:
        return self.graph.label_of(node_id)

    def distance_map(self) -> Dict[int, float]:
        """Distance map for the renderer; empty for algorithms without one."""
        return {}

    @property
    def tree_weight(self) -> int:
        return self.graph.total_weight(self.tree_edges)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(visited={len(self.visited)}/{self.graph.node_count()}, "
            f"finished={self.finished})"
        )


# ---------------------------------------------------------------------------
def sorted_insert(items: List[T], item: T, key: Callable[[T], float]) -> int:
    """
    Insert `item` before the first entry whose key is strictly greater.
    Equal keys keep insertion order (first in, first out).  Returns the
    index the item landed at.
    """
    value = key(item)
    for idx, existing in enumerate(items):
        if key(existing) > value:
            items.insert(idx, item)
            return idx
    items.append(item)
    return len(items) - 1
