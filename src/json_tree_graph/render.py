"""Flow export: Graph -> plain dictionaries for a React-Flow-style renderer.

The renderer itself (drawing, pan/zoom, selection) lives outside this
package.  This module only shapes the data it consumes::

    {
        "nodes": [{"id", "position": {"x", "y"},
                   "data": {"label", "tooltip", "type"}, "style": {...}}],
        "edges": [{"id", "source", "target"}],
    }

Every value is JSON-serializable.  The highlighted node (if any) gets a
thicker amber border and a glow on top of its kind colours.
"""

from __future__ import annotations

from typing import Any

from json_tree_graph.tree.nodes import Graph, GraphEdge, GraphNode, NodeKind

__all__ = ["HIGHLIGHT", "KIND_COLORS", "edge_to_dict", "node_to_dict", "to_flow"]

KIND_COLORS: dict[NodeKind, dict[str, str]] = {
    NodeKind.OBJECT: {"bg": "#e0e7ff", "border": "#6366f1"},
    NodeKind.ARRAY: {"bg": "#dcfce7", "border": "#22c55e"},
    NodeKind.PRIMITIVE: {"bg": "#ffedd5", "border": "#f97316"},
}

HIGHLIGHT: dict[str, str] = {
    "border": "#f59e0b",
    "shadow": "0 0 0 3px rgba(245, 158, 11, 0.35)",
}

NODE_WIDTH = 220


def _style(kind: NodeKind, highlighted: bool) -> dict[str, Any]:
    colors = KIND_COLORS[kind]
    style: dict[str, Any] = {
        "background": colors["bg"],
        "border": f"2px solid {colors['border']}",
        "borderRadius": 12,
        "padding": 10,
        "fontSize": 12,
        "width": NODE_WIDTH,
    }
    if highlighted:
        style["boxShadow"] = HIGHLIGHT["shadow"]
        style["border"] = f"3px solid {HIGHLIGHT['border']}"
    return style


def node_to_dict(node: GraphNode, highlighted: bool = False) -> dict[str, Any]:
    return {
        "id": node.id,
        "position": {"x": node.position.x, "y": node.position.y},
        "data": {
            "label": node.label,
            "tooltip": node.tooltip,
            "type": str(node.kind),
        },
        "style": _style(node.kind, highlighted),
    }


def edge_to_dict(edge: GraphEdge) -> dict[str, Any]:
    return {"id": edge.id, "source": edge.source, "target": edge.target}


def to_flow(graph: Graph, highlight_id: str | None = None) -> dict[str, Any]:
    """Export ``graph`` for the renderer, decorating ``highlight_id`` if given.

    Args:
        graph:        The graph to export.
        highlight_id: Id of the node to highlight.  Unknown ids and ``None``
            leave every node undecorated.

    Returns:
        ``{"nodes": [...], "edges": [...]}`` in graph order.
    """
    return {
        "nodes": [
            node_to_dict(node, highlighted=node.id == highlight_id)
            for node in graph.nodes
        ],
        "edges": [edge_to_dict(edge) for edge in graph.edges],
    }
