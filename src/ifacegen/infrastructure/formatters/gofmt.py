"""Formatters backed by the Go toolchain's gofmt / goimports binaries."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable

from ifacegen.domain.exceptions.output import FormatError
from ifacegen.domain.ports.source_formatter import SourceFormatterPort

logger = logging.getLogger(__name__)

GOFMT = "gofmt"
GOIMPORTS = "goimports"

# binary name -> absolute path, None if not installed
Which = Callable[[str], str | None]


class GoToolFormatter(SourceFormatterPort):
    """Pipes source through a formatter binary on stdin/stdout.

    Both gofmt and goimports accept a bare declaration list, so stub
    output needs no package clause.
    """

    def __init__(self, binary: str) -> None:
        """Initialize formatter.

        Args:
            binary: Name or path of gofmt / goimports
        """
        if not binary:
            raise ValueError("binary must not be empty")
        self._binary = binary

    def format(self, source: str, *, organize_imports: bool) -> str:
        """Run the binary. organize_imports is implied by goimports, ignored by gofmt.

        Raises:
            FormatError: If the binary cannot run or rejects the source
        """
        logger.debug("formatting with %s (organize imports: %s)", self._binary, organize_imports)
        try:
            proc = subprocess.run(
                [self._binary],
                input=source,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise FormatError(f"cannot run {self._binary}: {e}", source) from e

        if proc.returncode != 0:
            reason = proc.stderr.strip() or f"{self._binary} exited with status {proc.returncode}"
            raise FormatError(reason, source)
        return proc.stdout


class AutoFormatter(SourceFormatterPort):
    """Uses the best tool installed: goimports, then gofmt, then nothing."""

    def __init__(self, which: Which = shutil.which) -> None:
        """Initialize formatter.

        Args:
            which: Looks up binaries on PATH
        """
        self._which = which

    def format(self, source: str, *, organize_imports: bool) -> str:
        """Format with the first available tool.

        Raises:
            FormatError: If the chosen tool rejects the source
        """
        tools = (GOIMPORTS, GOFMT) if organize_imports else (GOFMT,)
        for tool in tools:
            path = self._which(tool)
            if path is not None:
                return GoToolFormatter(path).format(source, organize_imports=organize_imports)

        logger.warning("%s not found on PATH, output is not formatted", " / ".join(tools))
        return source
