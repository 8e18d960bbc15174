"""tree-sitter based symbol index.

Implements SymbolIndexPort. Records every top-level `type` declaration
of a package; interface bodies keep methods and embedded types in
declaration order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ifacegen.domain.exceptions.resolving import SourceParseError
from ifacegen.domain.model.declaration import GenericRef, Method, Signature, TypeDecl, Var
from ifacegen.domain.model.enums import TypeKind
from ifacegen.domain.model.location import Location
from ifacegen.domain.model.symbol_table import SymbolTable
from ifacegen.domain.ports.symbol_index import SymbolIndexPort
from ifacegen.infrastructure.adapters.go_parser import parse_go
from ifacegen.infrastructure.adapters.scope import FileScope, ImportSpec, ImportTable
from ifacegen.infrastructure.adapters.type_builder import build_type

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from tree_sitter import Node

    from ifacegen.domain.model.declaration import InterfaceElement
    from ifacegen.domain.model.package import Package
    from ifacegen.domain.model.type_expr import TypeRef
    from ifacegen.domain.ports.symbol_index import PackageNamer

logger = logging.getLogger(__name__)

# Node names differ between tree-sitter-go releases
_METHOD_NODES = frozenset({"method_elem", "method_spec"})
_EMBED_WRAPPERS = frozenset({"type_elem", "constraint_elem", "interface_type_name"})
_NAMED_TYPE_NODES = frozenset({"type_identifier", "qualified_type", "generic_type"})
_SKIPPED_NODES = frozenset({"comment"})


class TreeSitterSymbolIndex(SymbolIndexPort):
    """Indexes Go packages with tree-sitter.

    Stateless between index() calls. Files with syntax errors are
    indexed as far as they parse.
    """

    def index(self, package: Package, package_name: PackageNamer) -> SymbolTable:
        """Index top-level type declarations of every file of the package.

        Raises:
            SourceParseError: If a file cannot be read
        """
        table = SymbolTable(package.identity)

        for path in package.go_files:
            for decl in self.index_file(path, package, package_name):
                table.add(decl)

        logger.debug(
            "indexed %d type declarations in %s (%d files)",
            len(table),
            package.import_path,
            len(package.go_files),
        )
        return table

    def index_file(
        self,
        path: Path,
        package: Package,
        package_name: PackageNamer,
    ) -> Iterator[TypeDecl]:
        """Type declarations of one file, in source order."""
        try:
            source = path.read_bytes()
        except OSError as e:
            raise SourceParseError(path, e.strerror or str(e)) from e

        tree = parse_go(source)
        root = tree.root_node
        if root.has_error:
            logger.warning("%s: syntax errors, indexing what parsed", path)

        scope = FileScope(
            path=path,
            source=source,
            package=package.identity,
            imports=ImportTable(_imports(root, source), package_name),
        )
        if scope.imports.dot_imports:
            logger.debug(
                "%s: dot imports %s; unqualified names are attributed to %s",
                path,
                ", ".join(scope.imports.dot_imports),
                package.import_path,
            )

        for node in root.named_children:
            if node.type != "type_declaration":
                continue
            for spec in node.named_children:
                if spec.type in ("type_spec", "type_alias"):
                    decl = _declaration(spec, scope)
                    if decl is not None:
                        yield decl


def _imports(root: Node, source: bytes) -> Iterator[ImportSpec]:
    for node in root.named_children:
        if node.type != "import_declaration":
            continue
        for spec in _import_specs(node):
            path_node = spec.child_by_field_name("path")
            if path_node is None:
                continue
            path = _text(path_node, source).strip('"`')
            name_node = spec.child_by_field_name("name")
            alias = _text(name_node, source) if name_node is not None else None
            yield ImportSpec(path=path, alias=alias)


def _import_specs(node: Node) -> Iterator[Node]:
    for child in node.named_children:
        if child.type == "import_spec":
            yield child
        elif child.type == "import_spec_list":
            yield from (c for c in child.named_children if c.type == "import_spec")


def _declaration(spec: Node, scope: FileScope) -> TypeDecl | None:
    name_node = spec.child_by_field_name("name")
    type_node = spec.child_by_field_name("type")
    if name_node is None or type_node is None:
        return None

    type_params = _type_params(spec.child_by_field_name("type_parameters"), scope)
    scope = scope.with_type_params(frozenset(type_params))
    name = scope.text(name_node)
    row, column = name_node.start_point
    common = {
        "name": name,
        "package": scope.package,
        "is_alias": spec.type == "type_alias",
        "location": Location(file=scope.path, line=row + 1, column=column),
        "type_params": type_params,
    }

    if type_node.type == "parenthesized_type" and type_node.named_child_count == 1:
        type_node = type_node.named_children[0]

    if type_node.type == "interface_type":
        return TypeDecl(kind=TypeKind.INTERFACE, elements=_interface_elements(type_node, scope), **common)
    if type_node.type == "struct_type":
        return TypeDecl(kind=TypeKind.STRUCT, **common)
    if type_node.type in _NAMED_TYPE_NODES:
        return TypeDecl(kind=TypeKind.NAMED, target=build_type(type_node, scope), **common)
    return TypeDecl(kind=TypeKind.OTHER, **common)


def _type_params(node: Node | None, scope: FileScope) -> tuple[str, ...]:
    if node is None:
        return ()
    names: list[str] = []
    for child in node.named_children:
        names.extend(scope.text(n) for n in child.children_by_field_name("name"))
    return tuple(names)


def _interface_elements(node: Node, scope: FileScope) -> tuple[InterfaceElement, ...]:
    elements: list[InterfaceElement] = []

    for child in node.named_children:
        if child.type in _SKIPPED_NODES:
            continue
        if child.type in _METHOD_NODES:
            elements.append(_method(child, scope))
            continue

        ref = _embedded(child, scope)
        if ref is None:
            logger.debug("%s: skipping type set element %r", scope.path, scope.text(child))
        else:
            elements.append(ref)

    return tuple(elements)


def _embedded(node: Node, scope: FileScope) -> TypeRef | GenericRef | None:
    """Embedded interface reference; None for unions, `~T` and the like."""
    while node.type in _EMBED_WRAPPERS and node.named_child_count == 1:
        node = node.named_children[0]
    if node.type == "generic_type":
        return _generic(node, scope)
    if node.type not in ("type_identifier", "qualified_type"):
        return None
    return build_type(node, scope).as_ref()


def _generic(node: Node, scope: FileScope) -> GenericRef | None:
    """`Base[int, T]`: the generic type and its arguments."""
    type_node = node.child_by_field_name("type")
    args_node = node.child_by_field_name("type_arguments")
    ref = build_type(type_node, scope).as_ref() if type_node is not None else None
    if ref is None or args_node is None:
        return None
    args = tuple(build_type(arg, scope) for arg in args_node.named_children if arg.type not in _SKIPPED_NODES)
    if not args:
        return None
    return GenericRef(ref=ref, type_args=args)


def _method(node: Node, scope: FileScope) -> Method:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        raise SourceParseError(scope.path, f"method without name: {scope.text(node)!r}")

    params = _parameters(node.child_by_field_name("parameters"), scope)

    result_node = node.child_by_field_name("result")
    if result_node is None:
        results: tuple[Var, ...] = ()
    elif result_node.type == "parameter_list":
        results = _parameters(result_node, scope)
    else:
        results = (Var(name="", type=build_type(result_node, scope)),)

    return Method(name=scope.text(name_node), signature=Signature(params=params, results=results))


def _parameters(node: Node | None, scope: FileScope) -> tuple[Var, ...]:
    """Flatten `(a, b int, c string)` into one Var per name."""
    if node is None:
        return ()

    variables: list[Var] = []
    for decl in node.named_children:
        type_node = decl.child_by_field_name("type")
        if type_node is None:
            continue

        if decl.type == "parameter_declaration":
            type_expr = build_type(type_node, scope)
            names = decl.children_by_field_name("name")
            if names:
                variables.extend(Var(name=scope.text(n), type=type_expr) for n in names)
            else:
                variables.append(Var(name="", type=type_expr))

        elif decl.type == "variadic_parameter_declaration":
            name_node = decl.child_by_field_name("name")
            variables.append(
                Var(
                    name=scope.text(name_node) if name_node is not None else "",
                    type=build_type(type_node, scope),
                    variadic=True,
                )
            )

    return tuple(variables)


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")
