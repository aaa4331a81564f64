"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, start_traversal

REGISTRY is a dict:
    {
        "dfs": AlgoInfo(key, label, state_cls, edge_chance, force_weights, …),
        …
    }

The generator reads `edge_chance` / `force_weights` to shape the graph
for the selected algorithm; the session reads `state_cls` to start a
traversal.  Adding an algorithm is: write the state class, add one entry
here, register its worklist projection.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Type

from graph import Graph
from algorithms.base     import TraversalState, FINISHED_MESSAGE, sorted_insert
from algorithms.dfs      import DFSState
from algorithms.bfs      import BFSState
from algorithms.dijkstra import DijkstraState, QueueEntry, INF
from algorithms.prim     import PrimState
from algorithms.kruskal  import KruskalState, DisjointSet
from algorithms.worklist import WorklistRow, project_worklist, worklist_title
from algorithms.snapshot import Snapshot, build_snapshot


class UnknownAlgorithmError(ValueError):
    """Raised for an algorithm key that is not in the registry."""


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:             str                          # registry key, e.g. "bfs"
    label:           str                          # human label, e.g. "Breadth-First Search"
    state_cls:       Type[TraversalState]         # the stepwise state machine
    edge_chance:     float                        # density used when generating for this algo
    force_weights:   bool      = False            # generate weighted edges regardless of the checkbox
    complexity_time: str       = ""
    description:     str       = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", state_cls=DFSState, edge_chance=0.3,
        complexity_time="O(V + E)",
        description="Dives deep before backtracking, driven by a stack.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", state_cls=BFSState, edge_chance=0.35,
        complexity_time="O(V + E)",
        description="Explores layer by layer, driven by a FIFO queue.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra", state_cls=DijkstraState, edge_chance=0.45,
        force_weights=True,
        complexity_time="O(V · E)",
        description="Settles the closest unsettled node each step.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's MST", state_cls=PrimState, edge_chance=0.4,
        force_weights=True,
        complexity_time="O(E²)",
        description="Grows one tree by its cheapest outgoing edge.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's MST", state_cls=KruskalState, edge_chance=0.4,
        force_weights=True,
        complexity_time="O(E log E)",
        description="Takes edges cheapest first, skipping any that close a cycle.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def start_traversal(key: str, graph: Graph) -> TraversalState:
    info = get_algorithm(key)
    if info is None:
        raise UnknownAlgorithmError(f"Unknown algorithm: {key}")
    return info.state_cls.start(graph)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "UnknownAlgorithmError",
    "get_algorithm",
    "list_algorithms",
    "start_traversal",
    "TraversalState",
    "FINISHED_MESSAGE",
    "sorted_insert",
    "DFSState",
    "BFSState",
    "DijkstraState",
    "QueueEntry",
    "INF",
    "PrimState",
    "KruskalState",
    "DisjointSet",
    "WorklistRow",
    "project_worklist",
    "worklist_title",
    "Snapshot",
    "build_snapshot",
]
