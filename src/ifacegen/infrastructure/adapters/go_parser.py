"""tree-sitter Go grammar."""

from __future__ import annotations

import tree_sitter_go
from tree_sitter import Language, Parser, Tree

GO_LANGUAGE = Language(tree_sitter_go.language())


def parse_go(source: bytes) -> Tree:
    """Parse Go source. Never raises: syntax errors become ERROR nodes."""
    return Parser(GO_LANGUAGE).parse(source)
