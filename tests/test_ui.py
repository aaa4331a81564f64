"""
Tests for the HTML / SVG render functions.
"""

from algorithms import DijkstraState, KruskalState, build_snapshot, list_algorithms
from algorithms.worklist import WorklistRow
from ui import (
    algorithm_selector,
    playback_controls,
    render_canvas,
    status_panel,
    worklist_panel,
)


class TestCanvas:

    def test_empty_state(self):
        svg = render_canvas(None)
        assert svg.startswith("<svg")
        assert "Generate a graph to get started." in svg

    def test_static_graph_is_all_default(self, triangle):
        svg = render_canvas(triangle)
        assert svg.count("node-unvisited") == 3
        assert svg.count("edge-default") == 3

    def test_states_follow_snapshot(self, triangle, finish):
        state = KruskalState.start(triangle)
        finish(state)
        svg = render_canvas(triangle, build_snapshot(state))
        assert 'data-key="0-1"' in svg
        assert svg.count("edge-tree") == 2
        assert svg.count("edge-default") == 1

    def test_weights_and_distance_badges(self, diamond):
        state = DijkstraState.start(diamond)
        state.step()
        svg = render_canvas(diamond, build_snapshot(state))
        assert ">5</text>" in svg
        assert "∞" in svg


class TestControls:

    def test_selector_marks_current(self):
        html = algorithm_selector(list_algorithms(), "bfs")
        assert '<option value="bfs" title="Explores layer by layer, driven by a FIFO queue." selected>' in html
        assert html.count("<option") == 5

    def test_playback_toggles_run_and_stop(self):
        assert 'id="btn-run"' in playback_controls(is_running=False)
        assert 'id="btn-stop"' in playback_controls(is_running=True)
        assert "FINISHED" in playback_controls(is_finished=True)

    def test_playback_speed_select(self):
        html = playback_controls(speed="slow")
        assert 'id="speed-select"' in html
        assert '<option value="slow" selected>Slow</option>' in html
        assert html.count("<option") == 3

    def test_worklist_placeholder_and_empty(self):
        assert "Step to start a traversal." in worklist_panel()
        assert "Empty" in worklist_panel("Stack (top first)", [])

    def test_worklist_rows(self):
        rows = [WorklistRow(1, "A", value=0), WorklistRow(2, "C", value=float("inf"))]
        html = worklist_panel("Priority Queue (distance)", rows)
        assert "<td>A</td><td>0</td>" in html
        assert "<td>C</td><td>∞</td>" in html

    def test_status(self):
        assert "Visited A." in status_panel("Visited A.")
