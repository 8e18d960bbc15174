"""Go package value objects."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

TEST_PACKAGE_SUFFIX = "_test"


@dataclass(frozen=True, slots=True)
class PackageIdentity:
    """Identity of a Go package as seen by the qualifier.

    Attributes:
        import_path: Full import path ("net/http"), "_/abs/dir" for a
            directory outside any GOPATH or module
        display_name: Package clause name used as prefix ("http")
    """

    import_path: str
    display_name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.import_path:
            raise ValueError("import_path must not be empty")
        if not self.display_name:
            raise ValueError("display_name must not be empty")

    def in_test(self) -> PackageIdentity:
        """Same package, display name marked as the test-only variant."""
        return PackageIdentity(self.import_path, self.display_name + TEST_PACKAGE_SUFFIX)

    def __str__(self) -> str:
        """Format as name(path)."""
        return f"{self.display_name}({self.import_path})"


@dataclass(frozen=True, slots=True)
class Package:
    """A located Go package: directory plus the files that build in it.

    Attributes:
        dir: Package directory
        name: Package clause name
        import_path: Import path of dir
        go_files: Buildable non-test source files, sorted by name
    """

    dir: Path
    name: str
    import_path: str
    go_files: tuple[Path, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.dir is None:
            raise TypeError("dir must not be None")
        if not self.name:
            raise ValueError("package name must not be empty")
        if not self.import_path:
            raise ValueError("import_path must not be empty")

    @property
    def identity(self) -> PackageIdentity:
        """Qualifier identity of this package."""
        return PackageIdentity(self.import_path, self.name)


_MAJOR_VERSION = re.compile(r"v[0-9]+")
_NOT_IDENTIFIER = re.compile(r"[^0-9A-Za-z_]")


def assumed_package_name(import_path: str) -> str:
    """Package name guessed from an import path alone.

    Last path element, skipping a trailing `vN` major-version element,
    without a `go-` prefix, cut at the first character that cannot
    appear in an identifier (`yaml.v3` -> `yaml`, `foo-go` -> `foo`).

    Raises:
        ValueError: If import_path is empty
    """
    elems = [e for e in import_path.split("/") if e]
    if not elems:
        raise ValueError("import_path must not be empty")

    base = elems[-1]
    if len(elems) > 1 and _MAJOR_VERSION.fullmatch(base):
        base = elems[-2]
    base = base.removeprefix("go-")

    match = _NOT_IDENTIFIER.search(base)
    if match is not None:
        base = base[: match.start()]
    return base or elems[-1]
