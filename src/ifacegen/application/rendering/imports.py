"""Import block for generated files."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ifacegen.domain.model.package import assumed_package_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ifacegen.domain.model.interface_spec import MethodSpec
    from ifacegen.domain.model.package import PackageIdentity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImportLine:
    """One import spec.

    Attributes:
        path: Import path
        alias: Explicit name, "" when the path implies it
    """

    path: str
    alias: str = ""

    @property
    def is_std(self) -> bool:
        """Standard library: first path element has no dot and is not local."""
        first = self.path.split("/", 1)[0]
        return "." not in first and first != "_"

    def __str__(self) -> str:
        """Format as `alias "path"` / `"path"`."""
        if self.alias:
            return f'{self.alias} "{self.path}"'
        return f'"{self.path}"'


def import_for(package: PackageIdentity) -> ImportLine:
    """Import line for a package, aliased when its name is not the path's."""
    if package.display_name == assumed_package_name(package.import_path):
        return ImportLine(package.import_path)
    return ImportLine(package.import_path, package.display_name)


def collect_imports(methods: Iterable[MethodSpec]) -> tuple[PackageIdentity, ...]:
    """Packages referenced with a prefix by any method, sorted by import path."""
    packages: set[PackageIdentity] = set()
    for method in methods:
        packages |= method.imports

    ordered = tuple(sorted(packages, key=lambda p: p.import_path))
    clashes = [n for n, count in Counter(p.display_name for p in ordered).items() if count > 1]
    if clashes:
        logger.warning("packages share a name, generated code is ambiguous: %s", ", ".join(clashes))
    return ordered


def render_import_block(lines: Iterable[ImportLine]) -> list[str]:
    """`import ( ... )` with standard library first, one blank line between groups."""
    std: list[ImportLine] = []
    other: list[ImportLine] = []
    for line in sorted(set(lines), key=lambda i: i.path):
        (std if line.is_std else other).append(line)

    if not std and not other:
        return []

    out = ["import ("]
    out.extend(f"\t{line}" for line in std)
    if std and other:
        out.append("")
    out.extend(f"\t{line}" for line in other)
    out.append(")")
    return out
