"""Interface resolver: find an interface-shaped type and its method set."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Protocol

from ifacegen.domain.exceptions.locating import PackageNotFoundError
from ifacegen.domain.exceptions.resolving import InterfaceNotFoundError
from ifacegen.domain.model.declaration import GenericRef, InterfaceShape, Method, Signature, Var
from ifacegen.domain.model.enums import TypeKind
from ifacegen.domain.model.type_expr import TypeExpr, TypeRef

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ifacegen.domain.model.declaration import TypeDecl
    from ifacegen.domain.model.package import PackageIdentity
    from ifacegen.domain.model.symbol_table import SymbolTable

logger = logging.getLogger(__name__)

# Predeclared interfaces and their method sets
PREDECLARED_INTERFACES: dict[str, tuple[Method, ...]] = {
    "error": (Method("Error", Signature(results=(Var("", TypeExpr.named("string")),))),),
    "any": (),
    "comparable": (),
}

# (import path, type name) of declarations being expanded
_Seen = frozenset[tuple[str, str]]


class TableLoader(Protocol):
    """Gives access to other packages' symbol tables."""

    def table_for(self, identity: PackageIdentity) -> SymbolTable: ...


class InterfaceResolver:
    """Finds interfaces and expands their method sets.

    Stateless between find() calls.
    """

    def __init__(self, loader: TableLoader | None = None) -> None:
        """Initialize resolver.

        Args:
            loader: Loads foreign packages for embedded interfaces and
                named types declared elsewhere. None restricts
                resolution to the table passed to find().
        """
        self._loader = loader

    def find(self, table: SymbolTable, name: str) -> InterfaceShape:
        """First declaration named `name` whose underlying type is an interface.

        Declarations are scanned in table order. Duplicates are not an
        error: the first interface-shaped match wins.

        Args:
            table: Declarations to scan
            name: Exact type name

        Returns:
            InterfaceShape with the full method set in declaration order

        Raises:
            InterfaceNotFoundError: If no interface-shaped match exists
            PackageNotFoundError: If a referenced package cannot be loaded
        """
        for decl in table:
            if decl.name != name:
                continue
            methods = self._underlying_methods(decl, table, frozenset())
            if methods is None:
                logger.debug("%s at %s is %s, not an interface", name, decl.location, decl.kind.name)
                continue
            shape = InterfaceShape(name=name, package=table.package, methods=methods)
            logger.debug("found interface %s at %s", shape, decl.location)
            return shape

        raise InterfaceNotFoundError(name, table.package.import_path)

    def _underlying_methods(
        self,
        decl: TypeDecl,
        table: SymbolTable,
        seen: _Seen,
    ) -> tuple[Method, ...] | None:
        """Method set of decl's underlying interface, None if not an interface."""
        key = (decl.package.import_path, decl.name)
        if key in seen:
            return None
        seen = seen | {key}

        match decl.kind:
            case TypeKind.INTERFACE:
                return self._method_set(decl, table, seen)
            case TypeKind.NAMED:
                ref = decl.target.as_ref() if decl.target is not None else None
                if ref is None:
                    return None
                return self._methods_of(ref, table, seen)
            case _:
                return None

    def _methods_of(
        self,
        ref: TypeRef,
        table: SymbolTable,
        seen: _Seen,
        type_args: tuple[TypeExpr, ...] = (),
    ) -> tuple[Method, ...] | None:
        """Method set of the interface a reference names, None if not one.

        type_args instantiate a generic interface: its type parameters are
        replaced in every signature.
        """
        if ref.package is None:
            return PREDECLARED_INTERFACES.get(ref.name)

        target_table = table if ref.package == table.package else self._table_for(ref)
        decl = target_table.lookup(ref.name)
        if decl is None:
            return None
        methods = self._underlying_methods(decl, target_table, seen)
        if methods is None or not type_args:
            return methods
        return _instantiate(decl, methods, type_args)

    def _method_set(
        self,
        decl: TypeDecl,
        table: SymbolTable,
        seen: _Seen,
    ) -> tuple[Method, ...]:
        """Methods and embedded interfaces, expanded in declaration order.

        A method name already in the set keeps its first occurrence.
        """
        methods: dict[str, Method] = {}

        for element in decl.elements:
            if isinstance(element, Method):
                methods.setdefault(element.name, element)
                continue

            if isinstance(element, GenericRef):
                ref, type_args = element.ref, element.type_args
            else:
                ref, type_args = element, ()

            embedded = self._methods_of(ref, table, seen, type_args)
            if embedded is None:
                package = ref.package.import_path if ref.package else "builtin"
                raise InterfaceNotFoundError(ref.name, package)
            for method in embedded:
                methods.setdefault(method.name, method)

        return tuple(methods.values())

    def _table_for(self, ref: TypeRef) -> SymbolTable:
        if ref.package is None:
            raise ValueError(f"{ref.name} has no package")
        if self._loader is None:
            raise PackageNotFoundError(
                ref.package.import_path,
                f"needed for {ref.name}, but no package loader is configured",
            )
        return self._loader.table_for(ref.package)


def _instantiate(
    decl: TypeDecl,
    methods: tuple[Method, ...],
    type_args: tuple[TypeExpr, ...],
) -> tuple[Method, ...]:
    """Methods of a generic interface with its type parameters bound."""
    if len(type_args) != len(decl.type_params):
        logger.warning(
            "%s at %s takes %d type arguments, got %d",
            decl.name,
            decl.location,
            len(decl.type_params),
            len(type_args),
        )
    bound = dict(zip(decl.type_params, type_args))
    return tuple(
        Method(
            m.name,
            Signature(
                params=_bind(m.signature.params, bound),
                results=_bind(m.signature.results, bound),
            ),
        )
        for m in methods
    )


def _bind(variables: tuple[Var, ...], bound: Mapping[str, TypeExpr]) -> tuple[Var, ...]:
    return tuple(dataclasses.replace(v, type=v.type.substitute(bound)) for v in variables)
