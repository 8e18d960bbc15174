"""Declaration resolution exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ifacegen.domain.exceptions.base import IfaceGenError

if TYPE_CHECKING:
    from pathlib import Path


class SourceParseError(IfaceGenError):
    """Go source file cannot be read or parsed.

    Attributes:
        path: File that failed
        reason: Why it failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class InterfaceNotFoundError(IfaceGenError):
    """No interface-shaped type with the requested name.

    Attributes:
        name: Interface name looked up
        package: Import path of the package searched
    """

    def __init__(self, name: str, package: str) -> None:
        self.name = name
        self.package = package
        super().__init__(f"interface {name} is not found in package {package!r}")
