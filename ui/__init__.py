"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import algorithm_selector, playback_controls, worklist_panel, …
"""

from ui.canvas import render_canvas, CanvasConfig

from ui.controls import (
    algorithm_selector,
    graph_generator,
    playback_controls,
    worklist_panel,
    status_panel,
)

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "algorithm_selector",
    "graph_generator",
    "playback_controls",
    "worklist_panel",
    "status_panel",
]
