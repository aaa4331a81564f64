"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • algorithm_selector  – dropdown of registered algorithms
  • graph_generator     – node count + weights checkbox
  • playback_controls   – step / run / stop / reset, auto-run speed
  • worklist_panel      – the projected stack / queue / priority list
  • status_panel        – last status message

Design:
  - All panels are stateless render functions.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

import math
from typing import List, Optional

import settings
from algorithms import AlgoInfo, WorklistRow


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = settings.DEFAULT_ALGORITHM) -> str:
    options = []
    for algo in algorithms:
        sel = "selected" if algo.key == selected_key else ""
        options.append(
            f'<option value="{algo.key}" title="{algo.description}" {sel}>'
            f'{algo.label} — {algo.complexity_time}</option>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>Algorithm</h3>
      <select id="algo-select">
        {''.join(options)}
      </select>
    </div>
    """


# ---------------------------------------------------------------------------
# Graph Generator
# ---------------------------------------------------------------------------
def graph_generator(node_count: int = settings.DEFAULT_NODE_COUNT, with_weights: bool = False) -> str:
    checked = "checked" if with_weights else ""
    return f"""
    <div class="panel graph-generator">
      <h3>Graph</h3>
      <label>Nodes: <input type="number" id="node-count" value="{node_count}"
             min="{settings.MIN_NODES}" max="{settings.MAX_NODES}"></label>
      <label><input type="checkbox" id="edge-weights" {checked}> Edge weights</label>
      <button id="btn-generate" class="btn-secondary">Generate</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_running: bool = False,
    is_finished: bool = False,
    speed: str = settings.DEFAULT_SPEED,
) -> str:
    run_label = "Stop" if is_running else "Run"
    run_id    = "btn-stop" if is_running else "btn-run"
    badge     = ' <span class="finished-badge">FINISHED</span>' if is_finished else ""
    speeds    = "".join(
        f'<option value="{name}" {"selected" if name == speed else ""}>{name.title()}</option>'
        for name in settings.SPEED_PRESETS
    )
    return f"""
    <div class="panel playback-controls">
      <h3>Playback{badge}</h3>
      <div class="button-row">
        <button id="btn-step" title="One step">Step</button>
        <button id="{run_id}" title="{run_label}">{run_label}</button>
        <button id="btn-reset" title="Clear graph">Reset</button>
      </div>
      <label>Speed: <select id="speed-select">{speeds}</select></label>
    </div>
    """


# ---------------------------------------------------------------------------
# Worklist Panel
# ---------------------------------------------------------------------------
def worklist_panel(title: str = "", rows: Optional[List[WorklistRow]] = None) -> str:
    if not title:
        return """
        <div class="panel worklist-panel">
          <h3>Worklist</h3>
          <p class="placeholder">Step to start a traversal.</p>
        </div>
        """

    body = []
    if not rows:
        body.append('<tr><td>–</td><td>Empty</td><td></td></tr>')
    for row in rows or []:
        body.append(
            f'<tr><td>{row.position}</td><td>{row.label}</td><td>{_fmt_value(row.value)}</td></tr>'
        )

    return f"""
    <div class="panel worklist-panel">
      <h3>{title}</h3>
      <table>
        <thead><tr><th>#</th><th>Item</th><th>Value</th></tr></thead>
        <tbody>{''.join(body)}</tbody>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Status Panel
# ---------------------------------------------------------------------------
def status_panel(message: str = "") -> str:
    return f'<div class="panel status-panel"><p id="status">{message}</p></div>'


def _fmt_value(value: Optional[float]) -> str:
    if value is None:
        return ""
    if value == math.inf:
        return "∞"
    return f"{value:g}"
