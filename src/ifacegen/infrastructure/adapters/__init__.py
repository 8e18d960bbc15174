"""Source adapters: tree-sitter Go parsing and the symbol index built on it."""

from ifacegen.infrastructure.adapters.go_parser import GO_LANGUAGE, parse_go
from ifacegen.infrastructure.adapters.treesitter_index import TreeSitterSymbolIndex

__all__ = [
    "GO_LANGUAGE",
    "parse_go",
    "TreeSitterSymbolIndex",
]
