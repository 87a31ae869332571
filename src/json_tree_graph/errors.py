"""Exception types raised by json-tree-graph.

Only malformed input is exceptional: a syntactically valid path that matches
no node is reported as ``None`` by the resolver, not raised.
"""

from __future__ import annotations

__all__ = [
    "INVALID_DOCUMENT_MESSAGE",
    "InvalidSourceDocumentError",
    "JsonTreeGraphError",
    "MalformedPathError",
]

INVALID_DOCUMENT_MESSAGE = "Invalid JSON. Please fix the syntax and try again."


class JsonTreeGraphError(Exception):
    """Base class for all json-tree-graph errors."""


class MalformedPathError(JsonTreeGraphError, ValueError):
    """A path query has an unterminated bracket or a non-numeric index.

    Attributes:
        path:   The (already trimmed) path that failed to tokenize.
        reason: Short description of what was wrong.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"malformed path {path!r}: {reason}")


class InvalidSourceDocumentError(JsonTreeGraphError, ValueError):
    """The raw text supplied for visualization is not valid JSON.

    The ``str()`` of this error is the user-facing message; the underlying
    decoding error is chained as ``__cause__``.
    """

    def __init__(self, message: str = INVALID_DOCUMENT_MESSAGE) -> None:
        super().__init__(message)
