"""
worklist.py — Worklist Projection
==================================
Read-only view of whatever drives a traversal's next step, turned into
display rows in the order the algorithm will consume them:

    DFS       stack, top first
    BFS       queue, front first
    Dijkstra  priority queue, smallest distance first (stale entries included)
    Prim      candidate edges, cheapest first (stale candidates included)
    Kruskal   remaining edges, cheapest first

Nothing here mutates the state; calling it twice without a step in
between gives identical rows.
"""

from dataclasses import dataclass
from functools import singledispatch
from typing import List, Optional

from graph import EdgeKey
from algorithms.base import TraversalState
from algorithms.dfs import DFSState
from algorithms.bfs import BFSState
from algorithms.dijkstra import DijkstraState
from algorithms.prim import PrimState
from algorithms.kruskal import KruskalState


@dataclass(frozen=True)
class WorklistRow:
    """
    Attributes:
        position : 1-based position in consumption order.
        label    : node label, or "A–B" for edges.
        value    : distance (Dijkstra) or weight (Prim / Kruskal); None for DFS / BFS.
        node     : node id for node worklists.
        edge     : edge key for edge worklists.
    """

    position: int
    label:    str
    value:    Optional[float]   = None
    node:     Optional[int]     = None
    edge:     Optional[EdgeKey] = None

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "label":    self.label,
            "value":    self.value,
            "node":     self.node,
            "edge":     list(self.edge) if self.edge else None,
        }


@singledispatch
def project_worklist(state: TraversalState) -> List[WorklistRow]:
    """Display rows for the state's pending work."""
    return []


@project_worklist.register
def _(state: DFSState) -> List[WorklistRow]:
    return [
        WorklistRow(i + 1, state.graph.label_of(nid), node=nid)
        for i, nid in enumerate(reversed(state.stack))
    ]


@project_worklist.register
def _(state: BFSState) -> List[WorklistRow]:
    return [
        WorklistRow(i + 1, state.graph.label_of(nid), node=nid)
        for i, nid in enumerate(state.queue)
    ]


@project_worklist.register
def _(state: DijkstraState) -> List[WorklistRow]:
    return [
        WorklistRow(i + 1, state.graph.label_of(entry.id), value=entry.dist, node=entry.id)
        for i, entry in enumerate(state.queue)
    ]


@project_worklist.register
def _(state: PrimState) -> List[WorklistRow]:
    return [
        WorklistRow(i + 1, state.graph.edge_label(e.source, e.target), value=e.weight, edge=e.key)
        for i, e in enumerate(state.queue)
    ]


@project_worklist.register
def _(state: KruskalState) -> List[WorklistRow]:
    return [
        WorklistRow(i + 1, state.graph.edge_label(e.source, e.target), value=e.weight, edge=e.key)
        for i, e in enumerate(state.remaining_edges)
    ]


# ---------------------------------------------------------------------------
@singledispatch
def worklist_title(state: TraversalState) -> str:
    return "Worklist"


@worklist_title.register
def _(state: DFSState) -> str:
    return "Stack (top first)"


@worklist_title.register
def _(state: BFSState) -> str:
    return "Queue (front first)"


@worklist_title.register
def _(state: DijkstraState) -> str:
    return "Priority Queue (distance)"


@worklist_title.register
def _(state: PrimState) -> str:
    return "Candidate Edges (weight)"


@worklist_title.register
def _(state: KruskalState) -> str:
    return "Remaining Edges (weight)"


# ---------------------------------------------------------------------------
@singledispatch
def pending_nodes(state: TraversalState) -> List[int]:
    """Node ids waiting in the worklist and not yet visited."""
    return []


@pending_nodes.register
def _(state: DFSState) -> List[int]:
    return [nid for nid in state.stack if nid not in state.visited]


@pending_nodes.register
def _(state: BFSState) -> List[int]:
    return [nid for nid in state.queue if nid not in state.visited]


@pending_nodes.register
def _(state: DijkstraState) -> List[int]:
    return [e.id for e in state.queue if e.id not in state.visited]


@pending_nodes.register
def _(state: PrimState) -> List[int]:
    return [e.target for e in state.queue if e.target not in state.visited]
