"""
snapshot.py — Traversal Snapshot
=================================
A Snapshot is a frozen-in-time picture of everything the visualizer
needs to render one frame after a step:

    • Which nodes are visited / pending / current
    • Which edges are traversed / in the spanning tree
    • The worklist rows in consumption order
    • The distance map (Dijkstra)
    • The status message for the last step

Design decisions:
  - Snapshot is a plain frozen dataclass.  The traversal state is the
    only writer; the session / renderer are pure readers.
  - `node_states` and `edge_states` are flat dicts so the renderer can
    apply them in one pass without asking the traversal anything.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from graph import EdgeKey, EdgeState, NodeState
from algorithms.base import TraversalState
from algorithms.worklist import WorklistRow, pending_nodes, project_worklist, worklist_title


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        algorithm       : registry key of the algorithm that produced it.
        step_number     : number of step() calls that did work so far.
        current_node    : node touched by the last step (or None).
        visited         : visited node ids in visit order.
        node_states     : {node_id: NodeState value} for every node.
        edge_states     : {edge_key: EdgeState value} for every non-default edge.
        traversed_edges : sorted traversed edge keys.
        tree_edges      : sorted spanning-tree edge keys.
        distances       : {node_id: distance}; empty unless Dijkstra.
        worklist_title  : heading for the worklist panel.
        worklist        : WorklistRows in consumption order.
        message         : status text from the last start / step.
        finished        : terminal flag.
        tree_weight     : total weight of tree_edges.
    """

    algorithm:        str                       = ""
    step_number:      int                       = 0
    current_node:     Optional[int]             = None
    visited:          List[int]                 = field(default_factory=list)
    node_states:      Dict[int, str]            = field(default_factory=dict)
    edge_states:      Dict[EdgeKey, str]        = field(default_factory=dict)
    traversed_edges:  List[EdgeKey]             = field(default_factory=list)
    tree_edges:       List[EdgeKey]             = field(default_factory=list)
    distances:        Dict[int, float]          = field(default_factory=dict)
    worklist_title:   str                       = ""
    worklist:         List[WorklistRow]         = field(default_factory=list)
    message:          str                       = ""
    finished:         bool                      = False
    tree_weight:      int                       = 0

    def to_dict(self) -> dict:
        """JSON-safe form; infinity becomes "∞", edge keys become "a-b"."""
        return {
            "algorithm":       self.algorithm,
            "step_number":     self.step_number,
            "current_node":    self.current_node,
            "visited":         list(self.visited),
            "node_states":     {str(k): v for k, v in self.node_states.items()},
            "edge_states":     {_key_str(k): v for k, v in self.edge_states.items()},
            "traversed_edges": [list(k) for k in self.traversed_edges],
            "tree_edges":      [list(k) for k in self.tree_edges],
            "distances":       {str(k): _json_number(v) for k, v in self.distances.items()},
            "worklist_title":  self.worklist_title,
            "worklist":        [row.to_dict() for row in self.worklist],
            "message":         self.message,
            "finished":        self.finished,
            "tree_weight":     self.tree_weight,
        }


# ---------------------------------------------------------------------------
def build_snapshot(state: TraversalState) -> Snapshot:
    """Freeze the state's current picture.  Never mutates `state`."""
    pending = set(pending_nodes(state))

    node_states: Dict[int, str] = {}
    for nid in state.graph.node_ids():
        if nid == state.current_node:
            node_states[nid] = NodeState.CURRENT.value
        elif nid in state.visited:
            node_states[nid] = NodeState.VISITED.value
        elif nid in pending:
            node_states[nid] = NodeState.PENDING.value
        else:
            node_states[nid] = NodeState.UNVISITED.value

    edge_states: Dict[EdgeKey, str] = {}
    for key in state.traversed_edges:
        edge_states[key] = EdgeState.TRAVERSED.value
    for key in state.tree_edges:
        edge_states[key] = EdgeState.TREE.value

    return Snapshot(
        algorithm=state.key,
        step_number=state.steps_taken,
        current_node=state.current_node,
        visited=list(state.visit_order),
        node_states=node_states,
        edge_states=edge_states,
        traversed_edges=sorted(state.traversed_edges),
        tree_edges=sorted(state.tree_edges),
        distances=state.distance_map(),
        worklist_title=worklist_title(state),
        worklist=project_worklist(state),
        message=state.message,
        finished=state.finished,
        tree_weight=state.tree_weight,
    )


def _key_str(key: Tuple[int, int]) -> str:
    return f"{key[0]}-{key[1]}"


def _json_number(value: float):
    if value == math.inf:
        return "∞"
    return int(value) if float(value).is_integer() else value
