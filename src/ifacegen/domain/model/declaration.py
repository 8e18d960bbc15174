"""Go declarations: variables, signatures, methods, type declarations."""

from __future__ import annotations

from dataclasses import dataclass

from ifacegen.domain.model.enums import TypeKind
from ifacegen.domain.model.location import Location
from ifacegen.domain.model.package import PackageIdentity
from ifacegen.domain.model.type_expr import TypeExpr, TypeRef


@dataclass(frozen=True, slots=True)
class Var:
    """Parameter or result of a signature.

    Attributes:
        name: Declared name, "" when anonymous
        type: Type expression (element type when variadic)
        variadic: Final `...T` parameter
    """

    name: str
    type: TypeExpr
    variadic: bool = False


@dataclass(frozen=True, slots=True)
class Signature:
    """Function signature: ordered parameter and result tuples."""

    params: tuple[Var, ...] = ()
    results: tuple[Var, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for i, var in enumerate(self.params):
            if var.variadic and i != len(self.params) - 1:
                raise ValueError("only the final parameter can be variadic")
        if any(var.variadic for var in self.results):
            raise ValueError("results cannot be variadic")


@dataclass(frozen=True, slots=True)
class Method:
    """Interface method: name plus signature."""

    name: str
    signature: Signature

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")


@dataclass(frozen=True, slots=True)
class GenericRef:
    """Instantiated generic type, e.g. an embedded `Base[int]`.

    Attributes:
        ref: The generic type
        type_args: Type arguments in order
    """

    ref: TypeRef
    type_args: tuple[TypeExpr, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type_args:
            raise ValueError(f"generic reference {self.ref.name} needs type arguments")


# An interface body element: a method or an embedded type
InterfaceElement = Method | TypeRef | GenericRef


@dataclass(frozen=True, slots=True)
class TypeDecl:
    """Top-level type declaration.

    Attributes:
        name: Declared type name
        package: Declaring package
        kind: Shape of the right-hand side
        elements: Interface body in declaration order (INTERFACE only)
        target: Right-hand side type (NAMED only)
        is_alias: Declared with `=`
        location: Where the declaration starts
        type_params: Type parameter names in declaration order
    """

    name: str
    package: PackageIdentity
    kind: TypeKind
    elements: tuple[InterfaceElement, ...] = ()
    target: TypeExpr | None = None
    is_alias: bool = False
    location: Location | None = None
    type_params: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("type name must not be empty")
        if self.kind is TypeKind.NAMED and self.target is None:
            raise ValueError(f"named type {self.name} requires a target")
        if self.kind is not TypeKind.INTERFACE and self.elements:
            raise ValueError(f"only interfaces have elements, {self.name} is {self.kind.name}")

    @property
    def methods(self) -> tuple[Method, ...]:
        """Methods declared directly in the body (embedded ones excluded)."""
        return tuple(e for e in self.elements if isinstance(e, Method))

    @property
    def embeds(self) -> tuple[TypeRef | GenericRef, ...]:
        """Embedded type references."""
        return tuple(e for e in self.elements if not isinstance(e, Method))


@dataclass(frozen=True, slots=True)
class InterfaceShape:
    """Resolved interface: full method set in declaration order.

    Attributes:
        name: Interface name as requested
        package: Package the interface was found in
        methods: Method set, embedded interfaces expanded in place
    """

    name: str
    package: PackageIdentity
    methods: tuple[Method, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        names = [m.name for m in self.methods]
        if len(names) != len(set(names)):
            raise ValueError(f"interface {self.name} has duplicate methods: {names}")

    def __str__(self) -> str:
        """Format as pkg.Name (N methods)."""
        return f"{self.package.display_name}.{self.name} ({len(self.methods)} methods)"
