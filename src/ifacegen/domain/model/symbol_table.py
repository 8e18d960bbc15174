"""Declaration index of one Go package."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ifacegen.domain.model.declaration import TypeDecl
from ifacegen.domain.model.package import PackageIdentity


@dataclass(slots=True)
class SymbolTable:
    """Top-level type declarations of a package.

    Mutable - filled while indexing.
    Iteration order is insertion order: files in name order, then
    declarations in source order. Lookups rely on it being stable.

    Attributes:
        package: Package the declarations belong to
        _declarations: Declarations in insertion order
    """

    package: PackageIdentity
    _declarations: list[TypeDecl] = field(default_factory=list)

    def add(self, decl: TypeDecl) -> None:
        """Register a declaration.

        Raises:
            ValueError: If decl belongs to another package
        """
        if decl.package != self.package:
            raise ValueError(
                f"declaration {decl.name} belongs to {decl.package}, not {self.package}"
            )
        self._declarations.append(decl)

    def __iter__(self) -> Iterator[TypeDecl]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    def lookup(self, name: str) -> TypeDecl | None:
        """First declaration named `name`, None if absent."""
        if not name:
            raise ValueError("name must not be empty")
        for decl in self._declarations:
            if decl.name == name:
                return decl
        return None

    @property
    def declarations(self) -> tuple[TypeDecl, ...]:
        """All declarations in insertion order."""
        return tuple(self._declarations)
