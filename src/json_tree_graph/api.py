"""Public API functions for json-tree-graph.

This module provides the user-facing functions: parse_document, build_graph,
resolve_path, search and copy_path.  Each call creates a fresh GraphBuilder
(or uses the stateless module resolver) to guarantee zero global state
mutation between calls.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from json_tree_graph.errors import InvalidSourceDocumentError
from json_tree_graph.layout.config import LayoutConfig
from json_tree_graph.path.composer import display_path
from json_tree_graph.resolver import PathResolver, SearchResult
from json_tree_graph.tree.builder import GraphBuilder
from json_tree_graph.tree.nodes import Graph, GraphNode

__all__ = ["build_graph", "copy_path", "parse_document", "resolve_path", "search"]

_resolver = PathResolver()


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"non-standard JSON constant {name!r}")


def parse_document(raw: str) -> Any:
    """Parse raw JSON text into a Python value.

    This is the only place malformed source text is detected; callers must
    not build a graph when it raises.

    Args:
        raw: JSON text.

    Returns:
        The decoded value (dict, list, str, int, float, bool or None).

    Raises:
        InvalidSourceDocumentError: If ``raw`` is not valid JSON.  The
            decoding error is chained as ``__cause__``.
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidSourceDocumentError() from exc


def build_graph(value: Any, config: LayoutConfig | None = None) -> Graph:
    """Convert a JSON value into a positioned Graph.

    Args:
        value:  Any JSON value (dict, list, str, int, float, bool, None).
        config: Grid spacing.  Defaults to ``LayoutConfig()`` when None.

    Returns:
        A Graph with one node per value and one edge per parent/child pair.
    """
    builder = GraphBuilder(config=config if config is not None else LayoutConfig())
    return builder.build(value)


def resolve_path(query: str, nodes: Iterable[GraphNode]) -> GraphNode | None:
    """Return the node ``query`` points at, or ``None``.

    Malformed queries (``"items[a]"``, ``"items[0"``) return ``None`` just
    like queries that match no node.
    """
    return _resolver.resolve(query, nodes)


def search(query: str, nodes: Iterable[GraphNode]) -> SearchResult:
    """Run a search action; see ``PathResolver.search``."""
    return _resolver.search(query, nodes)


def copy_path(node_id: str) -> str:
    """Return the user-facing path for a node id (``root.`` prefix stripped)."""
    return display_path(node_id)
