"""Programmatic entry point: wires the real adapters into the generator."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ifacegen.application.services.generator import Generator
from ifacegen.infrastructure.adapters import TreeSitterSymbolIndex
from ifacegen.infrastructure.build import BuildContext, GoPackageImporter
from ifacegen.infrastructure.formatters import select_formatter

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ifacegen.domain.model.configuration import GeneratorConfig


def generate(
    config: GeneratorConfig,
    work_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Generate source for config.

    Args:
        config: Generator configuration
        work_dir: Destination package directory. None = current directory.
        environ: Go environment variables. None = os.environ.

    Returns:
        Formatted Go source

    Raises:
        IfaceGenError: Any failure in the pipeline
    """
    work_dir = (work_dir if work_dir is not None else Path.cwd()).resolve()
    context = BuildContext.from_environ(environ)

    generator = Generator(
        importer=GoPackageImporter(context, work_dir),
        index=TreeSitterSymbolIndex(),
        formatter=select_formatter(config.formatter),
        work_dir=work_dir,
    )
    return generator.generate(config)
