"""VisualizerSession: headless state behind an interactive JSON tree viewer.

Holds the raw text being edited, the last successfully parsed document, the
graph built from it, the search highlight and the status messages.  A UI
layer binds its widgets to these attributes and calls the action methods
(``visualize``, ``load_sample``, ``clear``, ``search``, ``select``).

Rules:
- A failed ``visualize()`` only sets ``error``.  The previous document, graph
  and highlight stay as they were and no build is attempted.
- A successful ``visualize()`` replaces the graph wholesale and clears the
  highlight and the match message.
- Graph builds are memoised in a per-session ``LRUCache`` keyed by the JSON
  text of the document, so switching back to an earlier document reuses the
  same immutable Graph.  Two sessions never share cache state.

Example::

    session = VisualizerSession()
    session.search("user.address.city")
    session.highlight_id          # "root.user.address.city"
    session.visualize("{oops")    # None
    session.error                 # "Invalid JSON. Please fix the syntax ..."
"""

from __future__ import annotations

import json
import logging
from typing import Any

from cachetools import LRUCache

from json_tree_graph.api import parse_document
from json_tree_graph.errors import InvalidSourceDocumentError
from json_tree_graph.layout.config import LayoutConfig
from json_tree_graph.path.composer import display_path
from json_tree_graph.render import to_flow
from json_tree_graph.resolver import PathResolver, SearchResult, SearchStatus
from json_tree_graph.tree.builder import GraphBuilder
from json_tree_graph.tree.nodes import Graph

__all__ = ["SAMPLE_DOCUMENT", "VisualizerSession"]

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENT: dict[str, Any] = {
    "user": {
        "id": 101,
        "name": "Akash",
        "address": {"city": "Bengaluru", "zip": "560001"},
        "roles": ["frontend", "ui"],
        "active": True,
    },
    "items": [
        {"id": 1, "name": "Notebook", "price": 99.5},
        {"id": 2, "name": "Pencil", "price": 9.9},
    ],
    "meta": None,
}


def _dump(document: Any) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)


class VisualizerSession:
    """Mutable view state around immutable graphs.

    Args:
        config: Grid spacing for every build in this session.  Defaults to
            ``LayoutConfig()`` when None.
        max_cache_size: Maximum number of built graphs kept in the LRU
            cache.  Defaults to 32.  Eviction is silent.
    """

    def __init__(
        self, config: LayoutConfig | None = None, max_cache_size: int = 32
    ) -> None:
        self._builder = GraphBuilder(
            config=config if config is not None else LayoutConfig()
        )
        self._resolver = PathResolver()
        self._cache: LRUCache[str, Graph] = LRUCache(maxsize=max_cache_size)

        self.raw: str = _dump(SAMPLE_DOCUMENT)
        self.error: str = ""
        self.query: str = ""
        self.highlight_id: str = ""
        self.match_message: str = ""
        self._document: Any = SAMPLE_DOCUMENT
        self._graph: Graph = self._build(SAMPLE_DOCUMENT)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def document(self) -> Any:
        """The document the current graph was built from."""
        return self._document

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def cache_size(self) -> int:
        """The current number of graphs held in the build cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def visualize(self, raw: str | None = None) -> Graph | None:
        """Parse the raw text and, if it is valid JSON, rebuild the graph.

        Args:
            raw: New text to use.  When None the current ``raw`` is used.

        Returns:
            The new graph, or None when the text is not valid JSON (in which
            case ``error`` holds the user-facing message).
        """
        if raw is not None:
            self.raw = raw
        self.error = ""
        try:
            document = parse_document(self.raw)
        except InvalidSourceDocumentError as exc:
            logger.debug("visualize rejected invalid JSON: %s", exc.__cause__)
            self.error = str(exc)
            return None
        self._set_document(document)
        return self._graph

    def load_sample(self) -> Graph:
        """Replace the text and graph with the built-in sample document."""
        self.raw = _dump(SAMPLE_DOCUMENT)
        self.error = ""
        self._set_document(SAMPLE_DOCUMENT)
        return self._graph

    def clear(self) -> Graph:
        """Reset to an empty object and drop the query state."""
        self.raw = "{}"
        self.error = ""
        self.query = ""
        self._set_document({})
        return self._graph

    def search(self, query: str | None = None) -> SearchResult:
        """Search the current graph and update the highlight.

        A blank query leaves the highlight untouched and sets no message.
        """
        if query is not None:
            self.query = query
        self.match_message = ""
        result = self._resolver.search(self.query, self._graph.nodes)
        if result.status is SearchStatus.EMPTY:
            return result
        self.highlight_id = result.node.id if result.node is not None else ""
        self.match_message = result.message
        return result

    def select(self, node_id: str) -> str:
        """Return the copyable path of a node in the current graph.

        Raises:
            KeyError: If the current graph has no node with ``node_id``.
        """
        if node_id not in self._graph:
            raise KeyError(node_id)
        return display_path(node_id)

    def flow(self) -> dict[str, Any]:
        """Renderer export of the current graph with the highlight applied."""
        return to_flow(self._graph, self.highlight_id or None)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _set_document(self, document: Any) -> None:
        self._graph = self._build(document)
        self._document = document
        self.highlight_id = ""
        self.match_message = ""

    def _build(self, document: Any) -> Graph:
        key = json.dumps(document, ensure_ascii=False)
        graph = self._cache.get(key)
        if graph is not None:
            logger.debug("build cache hit (%d nodes)", len(graph))
            return graph
        graph = self._builder.build(document)
        self._cache[key] = graph
        return graph
