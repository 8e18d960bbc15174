"""Package location exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ifacegen.domain.exceptions.base import IfaceGenError

if TYPE_CHECKING:
    from pathlib import Path


class PackageNotFoundError(IfaceGenError):
    """Import path (or directory) does not resolve to a Go package.

    Raised by direct resolution and when vendor fallback is exhausted.

    Attributes:
        import_path: Import path or directory that failed
        reason: Why resolution failed
        searched: Directories tried, in order
    """

    def __init__(
        self,
        import_path: str,
        reason: str,
        searched: tuple[Path, ...] = (),
    ) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.import_path = import_path
        self.reason = reason
        self.searched = searched

        msg = f"Cannot find package {import_path!r}: {reason}"
        if searched:
            msg += "\nsearched:\n" + "\n".join(f"  {d}" for d in searched)
        super().__init__(msg)


class NoGoFilesError(PackageNotFoundError):
    """Directory exists but holds no buildable Go source files.

    Attributes:
        directory: Directory that was scanned
    """

    def __init__(self, import_path: str, directory: Path) -> None:
        self.directory = directory
        super().__init__(import_path, f"no buildable Go source files in {directory}")
