"""JSON tree graph - positioned node graphs and path lookup for JSON documents."""

from __future__ import annotations

from json_tree_graph.api import (
    build_graph,
    copy_path,
    parse_document,
    resolve_path,
    search,
)
from json_tree_graph.errors import (
    InvalidSourceDocumentError,
    JsonTreeGraphError,
    MalformedPathError,
)
from json_tree_graph.layout.config import LayoutConfig
from json_tree_graph.path import IndexToken, KeyToken, compose, tokenize
from json_tree_graph.render import to_flow
from json_tree_graph.resolver import PathResolver, SearchResult, SearchStatus
from json_tree_graph.session import VisualizerSession
from json_tree_graph.tree import Graph, GraphBuilder, GraphEdge, GraphNode, NodeKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "Graph",
    "GraphBuilder",
    "GraphEdge",
    "GraphNode",
    "IndexToken",
    "InvalidSourceDocumentError",
    "JsonTreeGraphError",
    "KeyToken",
    "LayoutConfig",
    "MalformedPathError",
    "NodeKind",
    "PathResolver",
    "SearchResult",
    "SearchStatus",
    "VisualizerSession",
    "build_graph",
    "compose",
    "copy_path",
    "parse_document",
    "resolve_path",
    "search",
    "to_flow",
    "tokenize",
]
