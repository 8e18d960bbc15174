"""Go package importer: import path or directory -> Package.

Direct resolution only, in the order GOROOT, main module, module cache,
GOPATH. Vendor directories are the locator's business.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ifacegen.domain.exceptions.locating import NoGoFilesError, PackageNotFoundError
from ifacegen.domain.model.package import Package
from ifacegen.domain.ports.package_importer import PackageImporterPort
from ifacegen.infrastructure.build.constraints import (
    BuildConstraints,
    ConstraintSyntaxError,
    read_header,
)
from ifacegen.infrastructure.build.gomod import find_go_mod, parse_go_mod

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from ifacegen.infrastructure.build.context import BuildContext
    from ifacegen.infrastructure.build.gomod import GoMod

logger = logging.getLogger(__name__)

GO_SUFFIX = ".go"
TEST_SUFFIX = "_test.go"
LOCAL_IMPORT_PREFIX = "_"


class GoPackageImporter(PackageImporterPort):
    """Finds Go packages on disk the way `go/build` does.

    The main module (if any) is read once from the go.mod nearest to
    work_dir.
    """

    def __init__(self, context: BuildContext, work_dir: Path) -> None:
        """Initialize importer.

        Args:
            context: Roots and target platform
            work_dir: Directory the tool runs in

        Raises:
            PackageNotFoundError: If the nearest go.mod is unreadable or
                has no module directive
        """
        self._context = context
        self._constraints = BuildConstraints(context.goos, context.goarch)
        self._module = _main_module(work_dir)
        if self._module is not None:
            logger.debug("main module %s at %s", self._module.module, self._module.root)

    def import_path(self, import_path: str, src_dir: Path) -> Package:
        """Resolve an import path against GOROOT, module and GOPATH.

        Raises:
            PackageNotFoundError: If no root contains a buildable package
        """
        if not import_path:
            raise ValueError("import_path must not be empty")

        searched: list[Path] = []
        last_error: PackageNotFoundError | None = None

        for directory in self._candidate_dirs(import_path):
            searched.append(directory)
            if not directory.is_dir():
                continue
            try:
                return self._load(directory, import_path)
            except NoGoFilesError as e:
                last_error = e

        reason = last_error.reason if last_error else "not in GOROOT, main module, module cache or GOPATH"
        raise PackageNotFoundError(import_path, reason, tuple(searched))

    def import_dir(self, directory: Path) -> Package:
        """Treat a directory as a package.

        Raises:
            PackageNotFoundError: If directory does not exist
            NoGoFilesError: If it holds no buildable Go files
        """
        directory = directory.resolve()
        if not directory.is_dir():
            raise PackageNotFoundError(str(directory), "not a directory")
        return self._load(directory, self.dir_import_path(directory))

    def dir_import_path(self, directory: Path) -> str:
        """Module-, GOPATH- or GOROOT-relative import path.

        A directory outside every root gets `_` followed by its absolute
        path, as `go list` names local packages, so two such directories
        never share an import path.
        """
        directory = directory.resolve()

        if self._module is not None and directory.is_relative_to(self._module.root.resolve()):
            rel = directory.relative_to(self._module.root.resolve()).as_posix()
            return self._module.module if rel == "." else f"{self._module.module}/{rel}"

        for root in self._src_roots():
            root = root.resolve()
            if directory != root and directory.is_relative_to(root):
                return directory.relative_to(root).as_posix()

        return LOCAL_IMPORT_PREFIX + directory.as_posix()

    def _candidate_dirs(self, import_path: str) -> Iterator[Path]:
        if self._context.goroot is not None:
            yield self._context.goroot / "src" / import_path

        if self._module is not None:
            if self._module.owns(import_path):
                yield self._module.dir_in_main_module(import_path)
            else:
                dependency = self._module.dependency_dir(import_path, self._context.gomodcache)
                if dependency is not None:
                    yield dependency

        for root in self._context.gopath:
            yield root / "src" / import_path

    def _src_roots(self) -> Iterator[Path]:
        for root in self._context.gopath:
            yield root / "src"
        if self._context.goroot is not None:
            yield self._context.goroot / "src"

    def _load(self, directory: Path, import_path: str) -> Package:
        """Collect buildable files and check they agree on the package name.

        Raises:
            NoGoFilesError: If no file is buildable
            PackageNotFoundError: If files declare different packages
        """
        files: list[Path] = []
        names: dict[str, Path] = {}

        for path in sorted(directory.iterdir()):
            if not self._is_candidate(path):
                continue
            name = self._buildable_package(path)
            if name is None:
                continue
            files.append(path)
            names.setdefault(name, path)

        if not files:
            raise NoGoFilesError(import_path, directory)
        if len(names) > 1:
            found = ", ".join(f"{n} ({p.name})" for n, p in names.items())
            raise PackageNotFoundError(import_path, f"found packages {found} in {directory}")

        (name,) = names
        return Package(dir=directory, name=name, import_path=import_path, go_files=tuple(files))

    def _is_candidate(self, path: Path) -> bool:
        name = path.name
        return (
            name.endswith(GO_SUFFIX)
            and not name.endswith(TEST_SUFFIX)
            and not name.startswith(("_", "."))
            and path.is_file()
            and self._constraints.match_file_name(name)
        )

    def _buildable_package(self, path: Path) -> str | None:
        """Package name if the file's header constraints hold, else None."""
        try:
            header = read_header(path.read_text(encoding="utf-8", errors="replace"))
        except OSError as e:
            logger.warning("skipping %s: %s", path, e)
            return None

        if header.package is None:
            logger.warning("skipping %s: no package clause", path)
            return None

        try:
            if not self._constraints.match_header(header):
                logger.debug("skipping %s: build constraints exclude it", path)
                return None
        except ConstraintSyntaxError as e:
            logger.warning("skipping %s: %s", path, e)
            return None

        return header.package


def _main_module(work_dir: Path) -> GoMod | None:
    path = find_go_mod(work_dir)
    if path is None:
        return None
    try:
        return parse_go_mod(path)
    except (OSError, ValueError) as e:
        raise PackageNotFoundError(str(path.parent), f"invalid {path}: {e}") from e
