"""tree-sitter type node -> TypeExpr.

The node's source text is kept verbatim; every named type in it is
replaced by a TypeRef carrying its declaring package.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ifacegen.domain.model.package import PackageIdentity
from ifacegen.domain.model.type_expr import TypeExpr, TypeRef

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tree_sitter import Node

    from ifacegen.infrastructure.adapters.scope import FileScope

logger = logging.getLogger(__name__)

PREDECLARED_TYPES = frozenset(
    {
        "any", "bool", "byte", "comparable", "complex64", "complex128", "error",
        "float32", "float64", "int", "int8", "int16", "int32", "int64", "rune",
        "string", "uint", "uint8", "uint16", "uint32", "uint64", "uintptr",
    }
)  # fmt: skip


def build_type(node: Node, scope: FileScope) -> TypeExpr:
    """TypeExpr of a type node, text between named types kept as-is."""
    parts: list[str | TypeRef] = []
    cursor = node.start_byte

    for ref_node, ref in _references(node, scope):
        if ref_node.start_byte > cursor:
            parts.append(scope.source[cursor : ref_node.start_byte].decode("utf-8"))
        parts.append(ref)
        cursor = ref_node.end_byte

    if node.end_byte > cursor:
        parts.append(scope.source[cursor : node.end_byte].decode("utf-8"))

    return TypeExpr(tuple(parts))


def _references(node: Node, scope: FileScope) -> Iterator[tuple[Node, TypeRef]]:
    """Named types inside node, in source order."""
    match node.type:
        case "qualified_type":
            yield node, _qualified(node, scope)
        case "type_identifier":
            yield node, _unqualified(scope.text(node), scope)
        case _:
            for child in node.named_children:
                yield from _references(child, scope)


def _qualified(node: Node, scope: FileScope) -> TypeRef:
    """`pkg.T`: pkg looked up in the file's imports."""
    package_node = node.child_by_field_name("package")
    name_node = node.child_by_field_name("name")
    if package_node is None or name_node is None:
        text = scope.text(node)
        package_name, _, name = text.partition(".")
    else:
        package_name, name = scope.text(package_node), scope.text(name_node)

    identity = scope.imports.resolve(package_name)
    if identity is None:
        logger.warning("%s: package %s is not imported", scope.path, package_name)
        identity = PackageIdentity(package_name, package_name)
    return TypeRef(name, identity)


def _unqualified(name: str, scope: FileScope) -> TypeRef:
    """`T`: predeclared, a type parameter, or declared in this package."""
    if name in PREDECLARED_TYPES or name in scope.type_params:
        return TypeRef(name)
    return TypeRef(name, scope.package)
