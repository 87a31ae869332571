"""PathResolver: maps a user path query onto a node of an existing graph.

Resolution never rebuilds or mutates the graph.  The query is normalized,
tokenized, folded through ``compose`` starting at ``"root"``, and the
resulting canonical path is looked up by id.

Architecture:
- ``resolve()`` returns the node or ``None``.  A malformed query and a query
  that matches nothing both return ``None``.
- ``search()`` is the search-box action on top of ``resolve()``.  It keeps
  the two failure kinds apart in ``SearchResult.status`` but gives both the
  same user-facing message, ``"No match found"``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum, auto

from json_tree_graph.errors import MalformedPathError
from json_tree_graph.path.composer import ROOT, compose_all
from json_tree_graph.path.tokenizer import tokenize
from json_tree_graph.tree.nodes import GraphNode

__all__ = [
    "MATCH_FOUND",
    "NO_MATCH_FOUND",
    "PathResolver",
    "SearchResult",
    "SearchStatus",
    "normalize_query",
    "resolve",
    "target_path",
]

logger = logging.getLogger(__name__)

MATCH_FOUND = "Match found"
NO_MATCH_FOUND = "No match found"


class SearchStatus(StrEnum):
    """Outcome of a search action.

    - EMPTY:     Blank query; nothing was looked up.
    - MATCH:     A node with the target id exists.
    - NO_MATCH:  The query is well-formed but no node has that id.
    - MALFORMED: The query failed to tokenize.
    """

    EMPTY = auto()
    MATCH = auto()
    NO_MATCH = auto()
    MALFORMED = auto()


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Result of a ``search()`` call.

    Attributes:
        status:  See SearchStatus.
        query:   The trimmed query as typed.
        target:  Canonical path the query resolved to; ``None`` when the query
            was empty or malformed.
        node:    The matched node, or ``None``.
        message: User-facing text: ``""``, ``"Match found"`` or
            ``"No match found"``.
    """

    status: SearchStatus
    query: str
    target: str | None = None
    node: GraphNode | None = None
    message: str = ""

    @property
    def found(self) -> bool:
        return self.node is not None


def normalize_query(query: str) -> str:
    """Treat a bare identifier as a direct child of the root.

    Queries that start with ``$`` or ``root`` or contain ``.`` or ``[`` are
    returned unchanged; anything else gets a ``"$."`` prefix.
    """
    if query.startswith(("$", "root")) or "." in query or "[" in query:
        return query
    return f"$.{query}"


def target_path(query: str) -> str:
    """Return the canonical path a (normalized) query points at.

    Raises:
        MalformedPathError: If the query does not tokenize.
    """
    return compose_all(tokenize(query), start=ROOT)


class PathResolver:
    """Resolves path queries against a node set.

    Holds no graph state of its own; the node set is passed on each call so
    the caller decides which graph is current.

    Example::

        graph = GraphBuilder().build({"items": [{"id": 1}]})
        resolver = PathResolver()
        resolver.resolve("items[0].id", graph.nodes).id   # "root.items[0].id"
        resolver.resolve("items[a]", graph.nodes)         # None
    """

    def resolve(self, query: str, nodes: Iterable[GraphNode]) -> GraphNode | None:
        """Return the node ``query`` points at, or ``None``.

        Args:
            query: Path query, e.g. ``"$.user.name"``, ``"items[0]"``, ``"meta"``.
                Surrounding whitespace is ignored, as in ``search``.
            nodes: The current graph's nodes.  The first node with the target
                id wins.

        Returns:
            The matching node, or ``None`` for a malformed query or no match.
        """
        try:
            target = target_path(normalize_query(query.strip()))
        except MalformedPathError:
            return None
        return _find(target, nodes)

    def search(self, query: str, nodes: Iterable[GraphNode]) -> SearchResult:
        """Run the search action for ``query``.

        A blank query (after trimming) is a no-op: status EMPTY, empty
        message, no lookup.
        """
        q = query.strip()
        if not q:
            return SearchResult(status=SearchStatus.EMPTY, query=q)

        try:
            target = target_path(normalize_query(q))
        except MalformedPathError as exc:
            logger.debug("search %r: %s", q, exc.reason)
            return SearchResult(
                status=SearchStatus.MALFORMED, query=q, message=NO_MATCH_FOUND
            )

        node = _find(target, nodes)
        if node is None:
            logger.debug("search %r: no node with id %r", q, target)
            return SearchResult(
                status=SearchStatus.NO_MATCH,
                query=q,
                target=target,
                message=NO_MATCH_FOUND,
            )
        return SearchResult(
            status=SearchStatus.MATCH,
            query=q,
            target=target,
            node=node,
            message=MATCH_FOUND,
        )


def _find(target: str, nodes: Iterable[GraphNode]) -> GraphNode | None:
    return next((node for node in nodes if node.id == target), None)


# Module-level resolver (stateless, safe to share)
_resolver = PathResolver()


def resolve(query: str, nodes: Iterable[GraphNode]) -> GraphNode | None:
    """Shorthand for ``PathResolver().resolve(query, nodes)``."""
    return _resolver.resolve(query, nodes)
