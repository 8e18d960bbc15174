"""Code output exceptions: render, format, write."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ifacegen.domain.exceptions.base import IfaceGenError

if TYPE_CHECKING:
    from pathlib import Path


class RenderError(IfaceGenError):
    """Template could not be rendered.

    Attributes:
        template: Template name ("stub" or "mock")
        reason: Why rendering failed
    """

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"execute template:{template} err:{reason}")


class FormatError(IfaceGenError):
    """Formatter rejected the generated source.

    Attributes:
        reason: Formatter diagnostics
        source: Unformatted source text, kept for the error report
    """

    def __init__(self, reason: str, source: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        self.source = source
        super().__init__(f"format/imports err:{reason} of code\n`{source}`")


class WriteError(IfaceGenError, OSError):
    """Generated code could not be written.

    Inherits OSError for semantic correctness (I/O failure).

    Attributes:
        path: Destination file, None for standard output
        reason: Underlying error description
    """

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        target = "stdout" if path is None else f"file:{str(path)!r}"
        super().__init__(f"write {target} err:{reason}")
