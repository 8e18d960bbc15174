"""Per-file name resolution: imports and type parameters."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from ifacegen.domain.model.package import PackageIdentity, assumed_package_name

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from tree_sitter import Node

    from ifacegen.domain.ports.symbol_index import PackageNamer

logger = logging.getLogger(__name__)

BLANK_IMPORT = "_"
DOT_IMPORT = "."


@dataclass(frozen=True, slots=True)
class ImportSpec:
    """One import of a file.

    Attributes:
        path: Import path
        alias: Explicit name, `_`, `.`, or None
    """

    path: str
    alias: str | None = None


class ImportTable:
    """Maps the package names used in a file to package identities.

    Resolution is lazy and cached: most imports of a file never appear
    in an interface signature.
    """

    def __init__(self, specs: Iterable[ImportSpec], package_name: PackageNamer) -> None:
        """Initialize table.

        Args:
            specs: Imports of the file
            package_name: Real package name of an import path
        """
        self._package_name = package_name
        self._aliased: dict[str, str] = {}
        self._unaliased: list[str] = []
        self._dot: list[str] = []
        self._resolved: dict[str, PackageIdentity | None] = {}

        for spec in specs:
            if spec.alias is None:
                self._unaliased.append(spec.path)
            elif spec.alias == DOT_IMPORT:
                self._dot.append(spec.path)
            elif spec.alias != BLANK_IMPORT:
                self._aliased[spec.alias] = spec.path

    @property
    def dot_imports(self) -> tuple[str, ...]:
        """Paths imported with `.`."""
        return tuple(self._dot)

    def resolve(self, name: str) -> PackageIdentity | None:
        """Package a `name.T` reference points at, None if not imported.

        An alias maps to its path; the identity still carries the
        package's real name, since that is what generated code uses
        as prefix. An unaliased import is matched by the path-derived
        name first, then by the real name.
        """
        if name in self._resolved:
            return self._resolved[name]

        identity: PackageIdentity | None = None
        path = self._aliased.get(name)
        if path is not None:
            identity = PackageIdentity(path, self._package_name(path))
        else:
            path = next((p for p in self._unaliased if assumed_package_name(p) == name), None)
            if path is None:
                path = next((p for p in self._unaliased if self._package_name(p) == name), None)
            if path is not None:
                identity = PackageIdentity(path, name)

        self._resolved[name] = identity
        return identity


@dataclass(frozen=True, slots=True)
class FileScope:
    """Everything needed to turn a file's type nodes into TypeExprs.

    Attributes:
        path: Source file
        source: File contents, node offsets index into it
        package: Package the file belongs to
        imports: The file's import table
        type_params: Type parameter names of the enclosing declaration
    """

    path: Path
    source: bytes
    package: PackageIdentity
    imports: ImportTable
    type_params: frozenset[str] = field(default_factory=frozenset)

    def text(self, node: Node) -> str:
        """Source text of a node."""
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def with_type_params(self, names: frozenset[str]) -> FileScope:
        """Scope of a generic declaration."""
        return replace(self, type_params=names)
