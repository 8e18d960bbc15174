"""Infrastructure: Go toolchain environment, tree-sitter index, formatters, output."""
