"""Graph data types produced by GraphBuilder.

Provides NodeKind (StrEnum), Position, GraphNode, GraphEdge and the Graph
container.  All of them are frozen: a graph is built once per document and
replaced wholesale when the document changes, never mutated in place.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto

__all__ = ["Graph", "GraphEdge", "GraphNode", "NodeKind", "Position"]


class NodeKind(StrEnum):
    """The three kinds of JSON value a node can stand for.

    StrEnum values are the lowercased member names:
    - OBJECT    -> "object"    : JSON object {}
    - ARRAY     -> "array"     : JSON array []
    - PRIMITIVE -> "primitive" : string, number, bool or null
    """

    OBJECT = auto()
    ARRAY = auto()
    PRIMITIVE = auto()


@dataclass(frozen=True, slots=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class GraphNode:
    """One node per JSON value.

    Attributes:
        id:       Canonical path, e.g. ``root.items[0].id``.
        label:    ``"<key> { }"``, ``"<key> [ ]"`` or ``"<key>: <literal>"``.
        kind:     Which kind of value this node stands for.
        depth:    0 at the root, +1 per nesting level.
        position: Grid coordinates after re-centering.
        tooltip:  ``"<path>\\n<KIND>"``.
    """

    id: str
    label: str
    kind: NodeKind
    depth: int
    position: Position
    tooltip: str


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """Parent -> child relationship; ``id`` is ``"<source>-><target>"``."""

    id: str
    source: str
    target: str

    @classmethod
    def between(cls, source: str, target: str) -> GraphEdge:
        return cls(id=f"{source}->{target}", source=source, target=target)


@dataclass(frozen=True, slots=True)
class Graph:
    """Positioned node/edge set for one JSON document.

    Nodes are in depth-first pre-order (root first); edges are in the order
    their child nodes were visited.  ``get`` returns the first node with a
    given id, matching the resolver's lookup rule.
    """

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()
    _index: dict[str, GraphNode] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        index: dict[str, GraphNode] = {}
        for node in self.nodes:
            index.setdefault(node.id, node)
        object.__setattr__(self, "_index", index)

    @property
    def root(self) -> GraphNode | None:
        return self.nodes[0] if self.nodes else None

    def get(self, node_id: str) -> GraphNode | None:
        return self._index.get(node_id)

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def children_of(self, node_id: str) -> list[GraphNode]:
        """Direct children of ``node_id`` in visiting order.

        The k-th edge into a given id points at the k-th non-root node with
        that id, so colliding child ids still map to their own nodes.  When
        two parents share an id their children are returned together.
        """
        by_id: dict[str, list[GraphNode]] = {}
        for node in self.nodes[1:]:
            by_id.setdefault(node.id, []).append(node)

        seen: dict[str, int] = {}
        children: list[GraphNode] = []
        for edge in self.edges:
            k = seen.get(edge.target, 0)
            seen[edge.target] = k + 1
            if edge.source != node_id:
                continue
            candidates = by_id.get(edge.target, [])
            if k < len(candidates):
                children.append(candidates[k])
            else:
                children.append(self._index[edge.target])
        return children

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)
