"""Package loader: located packages and their symbol tables, cached."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ifacegen.application.services.locator import resolve_package
from ifacegen.domain.exceptions.locating import PackageNotFoundError
from ifacegen.domain.model.package import assumed_package_name

if TYPE_CHECKING:
    from pathlib import Path

    from ifacegen.domain.model.package import Package, PackageIdentity
    from ifacegen.domain.model.symbol_table import SymbolTable
    from ifacegen.domain.ports.package_importer import PackageImporterPort
    from ifacegen.domain.ports.symbol_index import SymbolIndexPort

logger = logging.getLogger(__name__)

# cgo pseudo-package, never on disk
CGO_PACKAGE = "C"


class PackageLoader:
    """Loads packages on demand, relative to one source directory.

    One loader per generator run. Every package is located and indexed
    at most once.
    """

    def __init__(
        self,
        importer: PackageImporterPort,
        index: SymbolIndexPort,
        src_dir: Path,
    ) -> None:
        """Initialize loader.

        Args:
            importer: Direct package resolution
            index: Builds symbol tables
            src_dir: Directory imports are resolved from (vendor lookup)
        """
        self._importer = importer
        self._index = index
        self._src_dir = src_dir
        self._packages: dict[str, Package] = {}
        self._tables: dict[str, SymbolTable] = {}
        self._names: dict[str, str] = {}

    def locate(self, import_path: str) -> Package:
        """Locate a package by import path.

        Raises:
            PackageNotFoundError: If the package cannot be found
        """
        package = self._packages.get(import_path)
        if package is None:
            package = resolve_package(self._importer, import_path, self._src_dir)
            logger.debug(
                "pkg:%s name:%s dir:%s files:%d",
                import_path,
                package.name,
                package.dir,
                len(package.go_files),
            )
            self._packages[import_path] = package
        return package

    def load(self, package: Package) -> SymbolTable:
        """Symbol table of an already located package."""
        table = self._tables.get(package.import_path)
        if table is None:
            table = self._index.index(package, self.package_name)
            self._tables[package.import_path] = table
        return table

    def table_for(self, identity: PackageIdentity) -> SymbolTable:
        """Symbol table of the package a type reference points at.

        Raises:
            PackageNotFoundError: If the package cannot be found
        """
        table = self._tables.get(identity.import_path)
        if table is not None:
            return table
        return self.load(self.locate(identity.import_path))

    def package_name(self, import_path: str) -> str:
        """Package clause name of an imported package.

        Falls back to the name guessed from the path when the package is
        not on disk, so a missing dependency does not stop generation.
        """
        name = self._names.get(import_path)
        if name is not None:
            return name

        if import_path == CGO_PACKAGE:
            name = CGO_PACKAGE
        else:
            try:
                name = self.locate(import_path).name
            except PackageNotFoundError as e:
                name = assumed_package_name(import_path)
                logger.debug("pkg:%s not found (%s), assuming name %s", import_path, e.reason, name)

        self._names[import_path] = name
        return name

