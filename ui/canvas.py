"""
canvas.py — SVG Graph Renderer
================================
Pure rendering function: Graph + Snapshot → SVG string.

The renderer consumes:
  • graph    – the Graph object (normalised node positions, edges)
  • snapshot – the current traversal Snapshot (node/edge states, distances)
  • config   – visual config (canvas size, colors, fonts, …)

Design decisions:
  - NO mutation.  The caller passes in everything and gets back a string.
  - State-based coloring is a dict lookup: state value → hex color.
  - Node positions are stored in [0, 1]; scaling to pixels happens here.
"""

import math
from typing import Dict, Optional, Tuple

import settings
from graph import Edge, EdgeState, Graph, Node, NodeState
from algorithms import Snapshot


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = settings.CANVAS_WIDTH
    height: int = settings.CANVAS_HEIGHT
    bg:     str = "#0f172a"

    # node colors (state → fill)
    node_colors: Dict[str, str] = {
        NodeState.UNVISITED.value: "#1d4ed8",   # blue
        NodeState.PENDING.value:   "#0ea5e9",   # cyan — waiting in the worklist
        NodeState.VISITED.value:   "#334155",   # slate — done
        NodeState.CURRENT.value:   "#f59e0b",   # amber — touched by the last step
    }

    # edge colors
    edge_colors: Dict[str, str] = {
        EdgeState.DEFAULT.value:   "#475569",
        EdgeState.TRAVERSED.value: "#22d3ee",
        EdgeState.TREE.value:      "#10b981",
    }

    # node
    node_radius:       int = 22
    node_stroke:       str = "#93c5fd"
    node_stroke_width: int = 2
    node_label_color:  str = "#e5e7eb"
    node_label_size:   int = 14

    # edge
    edge_width:        int = 2
    edge_width_tree:   int = 4
    edge_weight_color: str = "#cbd5e1"
    edge_weight_size:  int = 12

    # distance badge (Dijkstra)
    distance_color:    str = "#fbbf24"
    distance_size:     int = 12


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    graph: Optional[Graph],
    snapshot: Optional[Snapshot] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        graph    : The graph to render (None draws the empty-state hint).
        snapshot : Current traversal snapshot (or None for a static graph).
        config   : Visual config.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if graph is None:
        svg_parts.append(
            f'<text x="24" y="40" font-size="18" font-family="system-ui" '
            f'fill="{config.node_label_color}">Generate a graph to get started.</text>'
        )
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    # -- edges (draw first so nodes sit on top) --
    for edge in graph.edges:
        svg_parts.append(_render_edge(graph, edge, snapshot, config))

    # -- nodes --
    for node in graph.nodes:
        svg_parts.append(_render_node(node, snapshot, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(node: Node, snapshot: Optional[Snapshot], config: CanvasConfig) -> str:
    state_key = NodeState.UNVISITED.value
    if snapshot:
        state_key = snapshot.node_states.get(node.id, state_key)
    fill = config.node_colors.get(state_key, config.node_colors[NodeState.UNVISITED.value])

    cx, cy = _to_pixels(node, config)
    r = config.node_radius

    parts = [
        f'<g class="node node-{state_key}" data-id="{node.id}">',
        f'  <circle cx="{cx:.1f}" cy="{cy:.1f}" r="{r}" '
        f'fill="{fill}" stroke="{config.node_stroke}" stroke-width="{config.node_stroke_width}"/>',
        f'  <text x="{cx:.1f}" y="{cy + 5:.1f}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-family="system-ui" '
        f'fill="{config.node_label_color}">{node.label}</text>',
    ]

    # distance badge under the node
    if snapshot and node.id in snapshot.distances:
        d = snapshot.distances[node.id]
        d_str = "∞" if d == math.inf else f"{d:g}"
        parts.append(
            f'  <text x="{cx:.1f}" y="{cy + r + 16:.1f}" text-anchor="middle" '
            f'font-size="{config.distance_size}" font-family="monospace" '
            f'fill="{config.distance_color}">{d_str}</text>'
        )

    parts.append("</g>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(graph: Graph, edge: Edge, snapshot: Optional[Snapshot], config: CanvasConfig) -> str:
    src_node = graph.get_node(edge.source)
    tgt_node = graph.get_node(edge.target)
    if not src_node or not tgt_node:
        return ""

    state_key = EdgeState.DEFAULT.value
    if snapshot:
        state_key = snapshot.edge_states.get(edge.key, state_key)

    stroke = config.edge_colors.get(state_key, config.edge_colors[EdgeState.DEFAULT.value])
    stroke_width = config.edge_width_tree if state_key == EdgeState.TREE.value else config.edge_width

    x1, y1 = _to_pixels(src_node, config)
    x2, y2 = _to_pixels(tgt_node, config)

    parts = [
        f'<g class="edge edge-{state_key}" data-key="{edge.key[0]}-{edge.key[1]}">',
        f'  <line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
        f'stroke="{stroke}" stroke-width="{stroke_width}"/>',
    ]

    # weight label near the midpoint
    if graph.show_weights:
        mx = (x1 + x2) / 2
        my = (y1 + y2) / 2
        parts.append(
            f'  <text x="{mx:.1f}" y="{my - 8:.1f}" text-anchor="middle" '
            f'font-size="{config.edge_weight_size}" font-family="system-ui" '
            f'fill="{config.edge_weight_color}">{edge.weight}</text>'
        )

    parts.append("</g>")
    return "\n".join(parts)


def _to_pixels(node: Node, config: CanvasConfig) -> Tuple[float, float]:
    return node.x * config.width, node.y * config.height
