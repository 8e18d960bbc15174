"""Type expressions with package-relative references.

A Go type is kept as literal text interleaved with references to named
types, so the same expression can be rendered from any package's point
of view: `map[string]*http.Request` is `("map[string]*", TypeRef(Request,
net/http))`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass

from ifacegen.domain.model.package import PackageIdentity

# foreign package -> prefix ("" for none)
Qualifier = Callable[[PackageIdentity], str]


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Reference to a named type.

    Attributes:
        name: Type name as declared ("Reader")
        package: Declaring package, None for predeclared names and
            type parameters
    """

    name: str
    package: PackageIdentity | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("type name must not be empty")

    def render(self, qualifier: Qualifier) -> str:
        """Render as `prefix.Name` or `Name`."""
        if self.package is None:
            return self.name
        prefix = qualifier(self.package)
        if not prefix:
            return self.name
        return f"{prefix}.{self.name}"


@dataclass(frozen=True, slots=True)
class TypeExpr:
    """Type expression: literal text fragments and named type references.

    Attributes:
        parts: Fragments in source order
    """

    parts: tuple[str | TypeRef, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.parts:
            raise ValueError("type expression must not be empty")

    @classmethod
    def named(cls, name: str, package: PackageIdentity | None = None) -> TypeExpr:
        """Expression consisting of a single named type."""
        return cls((TypeRef(name, package),))

    @classmethod
    def literal(cls, text: str) -> TypeExpr:
        """Expression with no references to named types."""
        return cls((text,))

    def refs(self) -> Iterator[TypeRef]:
        """Named type references, in order."""
        for part in self.parts:
            if isinstance(part, TypeRef):
                yield part

    def render(self, qualifier: Qualifier) -> str:
        """Render text relative to the package the qualifier describes."""
        return "".join(
            part.render(qualifier) if isinstance(part, TypeRef) else part for part in self.parts
        )

    def packages(self, qualifier: Qualifier) -> frozenset[PackageIdentity]:
        """Packages that get a prefix when rendered (imports needed)."""
        return frozenset(
            ref.package for ref in self.refs() if ref.package is not None and qualifier(ref.package)
        )

    def substitute(self, type_args: Mapping[str, TypeExpr]) -> TypeExpr:
        """Replace type parameter references by the given expressions."""
        parts: list[str | TypeRef] = []
        for part in self.parts:
            if isinstance(part, TypeRef) and part.package is None and part.name in type_args:
                parts.extend(type_args[part.name].parts)
            else:
                parts.append(part)
        return TypeExpr(tuple(parts))

    def as_ref(self) -> TypeRef | None:
        """The reference if the expression is exactly one named type."""
        if len(self.parts) == 1 and isinstance(self.parts[0], TypeRef):
            return self.parts[0]
        return None
