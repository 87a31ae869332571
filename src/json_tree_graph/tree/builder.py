"""GraphBuilder: converts any valid JSON value into a positioned Graph.

Walks the value depth-first in pre-order, creating one GraphNode per value
and one GraphEdge per parent/child pair.  Node ids are canonical paths built
with ``compose``:
- Root is "root"
- Object members append ".{key}"
- Array elements append "[{index}]"

Traversal uses an explicit work stack rather than recursion, so documents
nested deeper than the interpreter's recursion limit still build.  Grid
positions come from a GridLayout created fresh for every build.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from json_tree_graph.layout.config import LayoutConfig
from json_tree_graph.layout.grid import GridLayout
from json_tree_graph.path.composer import ROOT, compose
from json_tree_graph.path.tokens import IndexToken, KeyToken
from json_tree_graph.tree.nodes import Graph, GraphEdge, GraphNode, NodeKind, Position

__all__ = [
    "GraphBuilder",
    "JsonValue",
    "classify",
    "escape_surrogates",
    "format_label",
    "json_literal",
]

logger = logging.getLogger(__name__)

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


def classify(value: Any) -> NodeKind:
    """Return the NodeKind of a JSON value.

    Raises:
        TypeError: If ``value`` is not a JSON-compatible Python value.
    """
    if isinstance(value, Mapping):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    if value is None or isinstance(value, (str, int, float)):
        return NodeKind.PRIMITIVE
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def escape_surrogates(text: str) -> str:
    """Replace lone surrogates with ``\\uXXXX`` escapes.

    ``json.loads`` accepts escapes such as ``"\\ud800"`` that decode to
    code points no UTF-8 stream can carry.  Paired escapes are already
    combined by the decoder, so any surrogate left in a str is unpaired.
    """
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def _number_literal(value: float) -> str:
    """Lay out a finite, non-zero float like ECMAScript Number::toString.

    ``repr`` supplies the shortest round-trip digits; only their layout
    differs: plain decimals for 1e-6 <= |x| < 1e21, otherwise exponent
    form with an explicit sign and no zero padding (``1e-7``, ``1.5e+300``).
    """
    sign = "-" if value < 0 else ""
    mantissa, _, exponent = repr(abs(value)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    raw = int_part + frac_part
    digits = raw.lstrip("0")
    # decimal point position relative to the first significant digit
    point = len(int_part) + int(exponent or 0) - (len(raw) - len(digits))
    digits = digits.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        body = digits + "0" * (point - k)
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        exp = point - 1
        head = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        body = f"{head}e{'+' if exp >= 0 else '-'}{abs(exp)}"
    return sign + body


def json_literal(value: Any) -> str:
    """Render a primitive the way ``JSON.stringify`` does.

    Integral floats drop their fractional part (``1.0`` -> ``1``), NaN /
    infinities become ``null``, other floats switch to exponent form at
    the same thresholds as JavaScript, and lone surrogates in strings are
    escaped.  Labels therefore match what a browser renderer shows for the
    same document.
    """
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        if not math.isfinite(value):
            return "null"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return _number_literal(value)
    if isinstance(value, int):
        return str(value)
    return escape_surrogates(json.dumps(value, ensure_ascii=False))


def format_label(key: str, kind: NodeKind, value: Any = None) -> str:
    if kind is NodeKind.OBJECT:
        return f"{key} {{ }}"
    if kind is NodeKind.ARRAY:
        return f"{key} [ ]"
    return f"{key}: {json_literal(value)}"


class _Visit(NamedTuple):
    value: Any
    path: str
    depth: int
    parent_id: str | None
    key: str


class _Pending(NamedTuple):
    id: str
    label: str
    kind: NodeKind
    depth: int
    tooltip: str


@dataclass
class GraphBuilder:
    """Converts any valid JSON value into a positioned Graph.

    Stateless between builds: every ``build`` call allocates its own
    GridLayout, so one builder can be shared and reused freely.

    Example::
        builder = GraphBuilder()
        graph = builder.build({"a": 1})
        # graph.nodes: root ("root { }") -> root.a ("a: 1")
        # graph.edges: root->root.a
    """

    config: LayoutConfig = field(default_factory=LayoutConfig)

    def build(self, value: JsonValue) -> Graph:
        """Convert a JSON value to a Graph.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            A Graph whose nodes are in pre-order with the root first.

        Raises:
            TypeError: If ``value`` (or anything nested in it) is not a valid
                JSON type.
        """
        grid = GridLayout(self.config)
        pending: list[_Pending] = []
        edges: list[GraphEdge] = []
        seen: set[str] = set()

        stack: list[_Visit] = [_Visit(value, ROOT, 0, None, ROOT)]
        while stack:
            visit = stack.pop()
            kind = classify(visit.value)
            node_id = visit.path

            if node_id in seen:
                logger.warning(
                    "duplicate node id %r: object keys containing '.', '[' or ']'"
                    " collide with nested paths",
                    node_id,
                )
            seen.add(node_id)

            grid.place(visit.depth)
            pending.append(
                _Pending(
                    id=node_id,
                    label=format_label(visit.key, kind, visit.value),
                    kind=kind,
                    depth=visit.depth,
                    tooltip=f"{node_id}\n{kind.upper()}",
                )
            )
            if visit.parent_id is not None:
                edges.append(GraphEdge.between(visit.parent_id, node_id))

            # children are pushed in reverse so they pop in document order
            if kind is NodeKind.OBJECT:
                children = [
                    _Visit(
                        child,
                        compose(node_id, KeyToken(str(k))),
                        visit.depth + 1,
                        node_id,
                        str(k),
                    )
                    for k, child in visit.value.items()
                ]
                stack.extend(reversed(children))
            elif kind is NodeKind.ARRAY:
                children = [
                    _Visit(
                        child,
                        compose(node_id, IndexToken(idx)),
                        visit.depth + 1,
                        node_id,
                        f"[{idx}]",
                    )
                    for idx, child in enumerate(visit.value)
                ]
                stack.extend(reversed(children))

        positions = grid.positions()
        nodes = tuple(
            GraphNode(
                id=p.id,
                label=p.label,
                kind=p.kind,
                depth=p.depth,
                position=Position(float(xy[0]), float(xy[1])),
                tooltip=p.tooltip,
            )
            for p, xy in zip(pending, positions, strict=True)
        )

        logger.debug(
            "built graph: %d nodes, %d edges, %d columns",
            len(nodes),
            len(edges),
            grid.max_cols,
        )
        return Graph(nodes=nodes, edges=tuple(edges))
