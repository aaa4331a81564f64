"""
Tests for worklist projection and snapshots.
"""

import pytest

from algorithms import (
    BFSState,
    DFSState,
    DijkstraState,
    KruskalState,
    PrimState,
    REGISTRY,
    build_snapshot,
    project_worklist,
    start_traversal,
    worklist_title,
)


class TestProjectWorklist:

    def test_dfs_top_of_stack_first(self, triangle):
        state = DFSState.start(triangle)
        state.step()
        rows = project_worklist(state)
        assert [(r.position, r.label, r.node) for r in rows] == [(1, "B", 1), (2, "C", 2)]
        assert all(r.value is None for r in rows)

    def test_bfs_front_of_queue_first(self, triangle):
        state = BFSState.start(triangle)
        state.step()
        assert [r.label for r in project_worklist(state)] == ["B", "C"]

    def test_dijkstra_keeps_stale_entries(self, diamond):
        state = DijkstraState.start(diamond)
        for _ in range(4):
            state.step()
        rows = project_worklist(state)
        assert [(r.label, r.value) for r in rows] == [("C", 5)]

    def test_prim_edges_cheapest_first(self, triangle):
        state = PrimState.start(triangle)
        rows = project_worklist(state)
        assert [(r.label, r.value, r.edge) for r in rows] == [("A–B", 2, (0, 1)), ("A–C", 9, (0, 2))]

    def test_kruskal_remaining_edges(self, triangle):
        state = KruskalState.start(triangle)
        state.step()
        assert [r.label for r in project_worklist(state)] == ["B–C", "A–C"]

    @pytest.mark.parametrize("key", list(REGISTRY))
    def test_projection_does_not_mutate(self, key, diamond):
        state = start_traversal(key, diamond)
        state.step()
        first = project_worklist(state)
        second = project_worklist(state)
        assert first == second
        assert state.steps_taken == 1

    def test_titles(self, triangle):
        titles = [worklist_title(start_traversal(k, triangle)) for k in REGISTRY]
        assert titles == [
            "Stack (top first)",
            "Queue (front first)",
            "Priority Queue (distance)",
            "Candidate Edges (weight)",
            "Remaining Edges (weight)",
        ]

    def test_row_to_dict(self, triangle):
        row = project_worklist(PrimState.start(triangle))[0]
        assert row.to_dict() == {"position": 1, "label": "A–B", "value": 2, "node": None, "edge": [0, 1]}


class TestSnapshot:

    def test_node_states_after_start(self, triangle):
        snap = build_snapshot(DFSState.start(triangle))
        assert snap.node_states == {0: "pending", 1: "unvisited", 2: "unvisited"}
        assert snap.step_number == 0
        assert snap.edge_states == {}

    def test_node_states_after_step(self, triangle):
        state = DFSState.start(triangle)
        state.step()
        state.step()
        snap = build_snapshot(state)
        assert snap.node_states == {0: "visited", 1: "current", 2: "pending"}
        assert snap.edge_states == {(0, 1): "traversed"}
        assert snap.visited == [0, 1]

    def test_spanning_tree_edges_marked_as_tree(self, triangle, finish):
        state = PrimState.start(triangle)
        finish(state)
        snap = build_snapshot(state)
        assert snap.edge_states[(0, 1)] == "tree"
        assert (0, 2) not in snap.edge_states
        assert snap.tree_weight == 5

    def test_snapshot_is_independent_of_later_steps(self, triangle):
        state = BFSState.start(triangle)
        state.step()
        snap = build_snapshot(state)
        state.step()
        assert snap.visited == [0]
        assert snap.step_number == 1

    def test_dijkstra_to_dict_marks_infinity(self, diamond):
        state = DijkstraState.start(diamond)
        state.step()
        data = build_snapshot(state).to_dict()
        assert data["distances"] == {"0": 0, "1": 1, "2": 5, "3": "∞"}
        assert data["algorithm"] == "dijkstra"
        assert data["worklist_title"] == "Priority Queue (distance)"
        assert data["traversed_edges"] == []

    def test_to_dict_edge_keys_are_strings(self, triangle, finish):
        state = KruskalState.start(triangle)
        finish(state)
        data = build_snapshot(state).to_dict()
        assert data["edge_states"] == {"0-1": "tree", "1-2": "tree"}
        assert data["finished"] is True

    def test_non_dijkstra_has_no_distances(self, triangle):
        assert build_snapshot(BFSState.start(triangle)).distances == {}
