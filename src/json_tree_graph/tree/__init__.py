"""Tree subpackage for JSON-to-graph conversion primitives.

Re-exports the public API for the tree module:
- Graph, GraphNode, GraphEdge, Position: the frozen graph data types
- NodeKind: StrEnum of the three value kinds (OBJECT, ARRAY, PRIMITIVE)
- GraphBuilder: converts any valid JSON value into a positioned Graph
"""

from json_tree_graph.tree.builder import GraphBuilder, JsonValue, classify, json_literal
from json_tree_graph.tree.nodes import Graph, GraphEdge, GraphNode, NodeKind, Position

__all__ = [
    "Graph",
    "GraphBuilder",
    "GraphEdge",
    "GraphNode",
    "JsonValue",
    "NodeKind",
    "Position",
    "classify",
    "json_literal",
]
