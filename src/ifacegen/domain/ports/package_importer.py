"""Package importer port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from ifacegen.domain.model.package import Package


class PackageImporterPort(ABC):
    """Port for turning import paths and directories into packages.

    Infrastructure layer must provide implementation.
    Vendor fallback is NOT the importer's job; see resolve_package().
    """

    @abstractmethod
    def import_path(self, import_path: str, src_dir: Path) -> Package:
        """Resolve an import path directly.

        Args:
            import_path: Non-empty, non-relative import path
            src_dir: Directory of the importing package

        Returns:
            Located package

        Raises:
            PackageNotFoundError: If no root contains the package
        """
        ...

    @abstractmethod
    def import_dir(self, directory: Path) -> Package:
        """Treat a directory as a package.

        Args:
            directory: Package directory

        Returns:
            Located package

        Raises:
            PackageNotFoundError: If directory has no buildable Go files
        """
        ...

    @abstractmethod
    def dir_import_path(self, directory: Path) -> str:
        """Import path a directory would have, whether or not it has Go files.

        Returns:
            Module- or GOPATH-relative import path, `_` plus the absolute
            path when neither applies
        """
        ...
