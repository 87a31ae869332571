"""Canonical path composition.

Canonical paths start at ``"root"`` and append one segment per access:
``.<key>`` for object members and ``[<index>]`` for array elements, e.g.
``root.user.roles[1]``.  The same ``compose`` step is used when the builder
assigns node ids and when the resolver turns a query into a target id, so the
two always agree.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from json_tree_graph.path.tokens import IndexToken, PathToken

__all__ = ["ROOT", "compose", "compose_all", "display_path"]

ROOT = "root"

_ROOT_PREFIX = re.compile(r"^root\.?")


def compose(parent_path: str, token: PathToken) -> str:
    """Return the canonical path of ``token`` accessed from ``parent_path``.

    Index access never gets a separator dot; key access gets one unless the
    parent path is empty.
    """
    if isinstance(token, IndexToken):
        return f"{parent_path}[{token.index}]"
    return f"{parent_path}.{token.key}" if parent_path else token.key


def compose_all(tokens: Iterable[PathToken], start: str = ROOT) -> str:
    """Fold ``compose`` over ``tokens`` starting from ``start``."""
    path = start
    for token in tokens:
        path = compose(path, token)
    return path


def display_path(node_id: str) -> str:
    """Strip the leading ``root`` / ``root.`` from a canonical path.

    This is the text offered to users when they copy a node's path:
    ``root.user.name`` -> ``user.name``, ``root[0]`` -> ``[0]``,
    ``root`` -> ``""``.
    """
    return _ROOT_PREFIX.sub("", node_id, count=1)
