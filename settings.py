"""
settings.py — Configuration
============================
Every tunable the visualizer uses lives here.  Values that make sense to
change per-deployment can be overridden from the environment.
"""

import os


# ---------------------------------------------------------------------------
# Graph generation
# ---------------------------------------------------------------------------
MIN_NODES          = 2
MAX_NODES          = 25
DEFAULT_NODE_COUNT = 8
WEIGHT_RANGE       = (1, 9)      # inclusive, used when weights are enabled

# ---------------------------------------------------------------------------
# Traversal / playback
# ---------------------------------------------------------------------------
DEFAULT_ALGORITHM = "dfs"

# seconds between auto-run steps
RUN_INTERVAL = float(os.getenv("GRAPH_VIS_RUN_INTERVAL", "0.25"))

SPEED_PRESETS = {
    "slow":   1.0,
    "medium": RUN_INTERVAL,
    "fast":   0.1,
}
DEFAULT_SPEED = "medium"

# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
CANVAS_WIDTH  = 900
CANVAS_HEIGHT = 600

# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("GRAPH_VIS_LOG_LEVEL", "INFO")
HOST      = os.getenv("GRAPH_VIS_HOST", "127.0.0.1")
PORT      = int(os.getenv("GRAPH_VIS_PORT", "5000"))
