"""Tokenizer for dotted/bracketed JSON path queries.

Accepted grammar (informal)::

    path    := ["$"] ["."] segment*
    segment := name | "." | "[" digits "]" ["."]

Bare names run until the next ``.`` or ``[``.  Bracket content must be a
non-negative integer literal (surrounding spaces allowed); quoted keys,
negative indices and wildcards are rejected with ``MalformedPathError``.
"""

from __future__ import annotations

import logging
import re

from json_tree_graph.errors import MalformedPathError
from json_tree_graph.path.tokens import IndexToken, KeyToken, PathToken

__all__ = ["tokenize"]

logger = logging.getLogger(__name__)

_INDEX = re.compile(r"[0-9]+")


def tokenize(path: str | None) -> list[PathToken]:
    """Split a path query into the ordered accesses it describes.

    Args:
        path: Query such as ``"$.items[0].id"`` or ``"user.name"``.  ``None``
            and the empty string both denote the root.

    Returns:
        Tokens in left-to-right order.  An empty list means the root itself.

    Raises:
        MalformedPathError: On an unterminated ``[`` or a bracket whose
            content is not a non-negative integer.
    """
    if not path:
        return []

    s = path.strip()
    if s.startswith("$"):
        s = s[1:]
    if s.startswith("."):
        s = s[1:]

    tokens: list[PathToken] = []
    buf = ""
    i = 0
    n = len(s)

    while i < n:
        ch = s[i]

        if ch == ".":
            if buf:
                tokens.append(KeyToken(buf))
                buf = ""
            i += 1
            continue

        if ch == "[":
            if buf:
                tokens.append(KeyToken(buf))
                buf = ""
            close = s.find("]", i + 1)
            if close == -1:
                logger.debug("unterminated bracket in path %r", path)
                raise MalformedPathError(s, "unterminated '['")
            content = s[i + 1 : close].strip()
            if not _INDEX.fullmatch(content):
                logger.debug("non-numeric index %r in path %r", content, path)
                raise MalformedPathError(
                    s, f"bracket index must be a non-negative integer, got {content!r}"
                )
            tokens.append(IndexToken(int(content)))
            i = close + 1
            # a single dot right after ']' is swallowed
            if i < n and s[i] == ".":
                i += 1
            continue

        buf += ch
        i += 1

    if buf:
        tokens.append(KeyToken(buf))

    return tokens
