"""Symbol index port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ifacegen.domain.model.package import Package
    from ifacegen.domain.model.symbol_table import SymbolTable

# import path -> package clause name
PackageNamer = Callable[[str], str]


class SymbolIndexPort(ABC):
    """Port for building a declaration index from Go source files.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def index(self, package: Package, package_name: PackageNamer) -> SymbolTable:
        """Index top-level type declarations of a package.

        Args:
            package: Located package
            package_name: Resolves imported packages' clause names, used
                to map unaliased `pkg.T` references to import paths

        Returns:
            SymbolTable with declarations in file, then source order

        Raises:
            SourceParseError: If a file cannot be read
        """
        ...
