"""
main.py — Graph Traversal Visualizer Flask App
================================================
The web server that powers the visualizer.

Routes:
  GET  /                     – main UI
  GET  /api/state            – current session state
  GET  /api/worklist         – projected worklist rows
  POST /api/graph/generate   – generate a new graph for the selected algorithm
  POST /api/algo             – switch algorithm (drops the traversal)
  POST /api/step             – advance one step (starts the traversal if needed)
  POST /api/run              – start auto-run
  POST /api/stop             – cancel auto-run
  POST /api/speed            – pick an auto-run speed preset
  POST /api/tick             – scheduler tick while running (the page polls this)
  POST /api/reset            – clear graph and traversal

State management:
  One module-level Session holds the graph, the traversal bound to it,
  the selected algorithm and the auto-run handle.  The server runs
  single-threaded, so no two requests ever step at the same time.
"""

import logging
from typing import Optional

from flask import Flask, jsonify, render_template_string, request

import settings
from algorithms import UnknownAlgorithmError, list_algorithms
from engine import Session
from ui import (
    algorithm_selector,
    graph_generator,
    playback_controls,
    render_canvas,
    status_panel,
    worklist_panel,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)

SESSION = Session()


# ---------------------------------------------------------------------------
# Response helpers
# ---------------------------------------------------------------------------
def _payload() -> dict:
    """Everything the page needs to redraw after a mutation."""
    snap = SESSION.snapshot()
    return {
        "svg":        render_canvas(SESSION.graph, snap),
        "status":     SESSION.message,
        "worklist":   worklist_panel(snap.worklist_title, snap.worklist) if snap else worklist_panel(),
        "playback":   playback_controls(SESSION.is_running, SESSION.is_finished, SESSION.speed),
        "is_running": SESSION.is_running,
        "finished":   SESSION.is_finished,
        "algorithm":  SESSION.algorithm,
        "snapshot":   snap.to_dict() if snap else None,
    }


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _seed(value) -> Optional[int]:
    """Only plain integers seed the generator; anything else means random."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _flag(value) -> bool:
    """JSON booleans as-is; "true" / "1" / "on" / "yes" strings (any case) from form-style clients."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "on", "yes")
    return value is True


@app.errorhandler(UnknownAlgorithmError)
def _unknown_algorithm(err):
    return jsonify({"error": str(err)}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    if SESSION.graph is None:
        SESSION.generate()
    payload = _payload()
    return render_template_string(
        INDEX_TEMPLATE,
        svg=payload["svg"],
        status=status_panel(SESSION.message),
        worklist=payload["worklist"],
        playback=payload["playback"],
        algo_selector=algorithm_selector(list_algorithms(), SESSION.algorithm),
        graph_gen=graph_generator(),
        tick_ms=50,
    )


# ---------------------------------------------------------------------------
# API: State
# ---------------------------------------------------------------------------
@app.route("/api/state")
def api_state():
    return jsonify(SESSION.to_dict())


@app.route("/api/worklist")
def api_worklist():
    return jsonify({"rows": [row.to_dict() for row in SESSION.worklist()]})


# ---------------------------------------------------------------------------
# API: Graph / Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/graph/generate", methods=["POST"])
def api_graph_generate():
    data = _json_body()
    SESSION.generate(
        node_count=data.get("nodes", settings.DEFAULT_NODE_COUNT),
        with_weights=_flag(data.get("weighted", False)),
        seed=_seed(data.get("seed")),
    )
    return jsonify(_payload())


@app.route("/api/algo", methods=["POST"])
def api_algo():
    SESSION.select_algorithm(str(_json_body().get("algo_key", settings.DEFAULT_ALGORITHM)))
    return jsonify(_payload())


# ---------------------------------------------------------------------------
# API: Stepping
# ---------------------------------------------------------------------------
@app.route("/api/step", methods=["POST"])
def api_step():
    SESSION.step()
    return jsonify(_payload())


@app.route("/api/run", methods=["POST"])
def api_run():
    SESSION.run()
    return jsonify(_payload())


@app.route("/api/stop", methods=["POST"])
def api_stop():
    SESSION.stop()
    return jsonify(_payload())


@app.route("/api/speed", methods=["POST"])
def api_speed():
    SESSION.set_speed(str(_json_body().get("speed", settings.DEFAULT_SPEED)))
    return jsonify(_payload())


@app.route("/api/tick", methods=["POST"])
def api_tick():
    stepped = SESSION.tick()
    payload = _payload()
    payload["stepped"] = stepped
    return jsonify(payload)


@app.route("/api/reset", methods=["POST"])
def api_reset():
    SESSION.reset()
    return jsonify(_payload())


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Graph Traversal Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      font-family: system-ui, -apple-system, sans-serif;
      background: #020617;
      color: #e5e7eb;
      display: flex;
      height: 100vh;
      overflow: hidden;
    }
    #sidebar {
      width: 320px;
      background: #0f172a;
      border-right: 1px solid #1e293b;
      overflow-y: auto;
      padding: 20px 16px;
    }
    #main { flex: 1; display: flex; flex-direction: column; }
    #canvas-svg { flex: 1; display: flex; align-items: center; justify-content: center; }
    .panel {
      background: #111827;
      border: 1px solid #1e293b;
      border-radius: 8px;
      padding: 12px;
      margin-bottom: 12px;
    }
    .panel h3 { font-size: 13px; text-transform: uppercase; color: #93c5fd; margin-bottom: 8px; }
    .panel label { display: block; margin-bottom: 6px; font-size: 14px; }
    .button-row { display: flex; gap: 8px; }
    button, select, input[type=number] {
      background: #1e293b; color: #e5e7eb; border: 1px solid #334155;
      border-radius: 6px; padding: 6px 10px;
    }
    button:hover { background: #334155; cursor: pointer; }
    table { width: 100%; border-collapse: collapse; font-size: 13px; }
    td, th { padding: 4px; text-align: left; border-bottom: 1px solid #1e293b; }
    .finished-badge { color: #10b981; }
    .placeholder { color: #64748b; font-size: 13px; }
    #status-bar { padding: 10px 16px; border-top: 1px solid #1e293b; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo">{{ algo_selector|safe }}</div>
    <div id="graph-gen">{{ graph_gen|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="worklist">{{ worklist|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-svg">{{ svg|safe }}</div>
    <div id="status-bar">{{ status|safe }}</div>
  </div>

  <script>
    let ticker = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function apply(data) {
      if (data.error) {
        document.getElementById('status').textContent = data.error;
        return;
      }
      document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('worklist').innerHTML = data.worklist;
      document.getElementById('playback').innerHTML = data.playback;
      document.getElementById('status').textContent = data.status;
      if (!data.is_running) stopTicker();
    }

    function stopTicker() {
      if (ticker !== null) {
        clearInterval(ticker);
        ticker = null;
      }
    }

    function startTicker() {
      stopTicker();
      ticker = setInterval(async () => apply(await post('/api/tick')), {{ tick_ms }});
    }

    document.addEventListener('click', async (e) => {
      switch (e.target.id) {
        case 'btn-generate':
          stopTicker();
          apply(await post('/api/graph/generate', {
            nodes: document.getElementById('node-count').value,
            weighted: document.getElementById('edge-weights').checked,
          }));
          break;
        case 'btn-step':
          apply(await post('/api/step'));
          break;
        case 'btn-run': {
          const data = await post('/api/run');
          apply(data);
          if (data.is_running) startTicker();
          break;
        }
        case 'btn-stop':
          stopTicker();
          apply(await post('/api/stop'));
          break;
        case 'btn-reset':
          stopTicker();
          apply(await post('/api/reset'));
          break;
      }
    });

    document.addEventListener('change', async (e) => {
      if (e.target.id === 'speed-select') {
        apply(await post('/api/speed', {speed: e.target.value}));
      }
    });

    document.getElementById('algo-select')?.addEventListener('change', async (e) => {
      stopTicker();
      apply(await post('/api/algo', {algo_key: e.target.value}));
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Graph Traversal Visualizer on http://%s:%d", settings.HOST, settings.PORT)
    app.run(host=settings.HOST, port=settings.PORT, threaded=False)
