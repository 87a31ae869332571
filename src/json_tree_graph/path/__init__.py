"""Path subpackage: query tokenizing and canonical path composition.

Re-exports the public API for the path module:
- KeyToken / IndexToken: the two atomic access tokens (union alias PathToken)
- tokenize: parses a dotted/bracketed query into tokens
- compose / compose_all: build canonical ``root...`` paths from tokens
- display_path: strips the ``root`` prefix for user-facing copy text
"""

from json_tree_graph.path.composer import ROOT, compose, compose_all, display_path
from json_tree_graph.path.tokenizer import tokenize
from json_tree_graph.path.tokens import IndexToken, KeyToken, PathToken

__all__ = [
    "ROOT",
    "IndexToken",
    "KeyToken",
    "PathToken",
    "compose",
    "compose_all",
    "display_path",
    "tokenize",
]
