"""Command line interface.

    ifacegen -i io.Reader
    ifacegen -i io.ReadCloser -m -o readcloser_mock.go
    ifacegen -i ./store.Store -r '*fakeStore'
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from ifacegen import __version__
from ifacegen.domain.exceptions.base import IfaceGenError
from ifacegen.domain.model.configuration import GeneratorConfig
from ifacegen.domain.model.enums import FormatterChoice
from ifacegen.infrastructure.output import write_source
from ifacegen.presentation.api import generate

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="ifacegen",
        description="Generate method stubs or a counting mock for a Go interface.",
    )
    parser.add_argument(
        "-i",
        "--interface",
        required=True,
        help="interface to implement: [import/path.]Name, e.g. io.Reader or ./store.Store",
    )
    parser.add_argument(
        "-r",
        "--receiver",
        default="",
        help="receiver type (default: *{Interface}Gen, or *{Interface}Mock with -m)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="output file (default: standard output)",
    )
    parser.add_argument(
        "-m",
        "--mock",
        action="store_true",
        help="generate a mock struct instead of method stubs",
    )
    parser.add_argument(
        "-t",
        "--mock-in-test",
        action="store_true",
        help="mock lives in the package's _test variant",
    )
    parser.add_argument(
        "--formatter",
        choices=[choice.value for choice in FormatterChoice],
        default=FormatterChoice.AUTO.value,
        help="post-processing tool (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(*, verbose: bool) -> None:
    """Send log records to stderr through rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        config = GeneratorConfig(
            interface=args.interface,
            receiver=args.receiver,
            output=args.output,
            mock=args.mock,
            mock_in_test=args.mock_in_test,
            formatter=FormatterChoice(args.formatter),
        )
    except ValueError as e:
        logger.error("invalid arguments: %s", e)
        return EXIT_ERROR

    try:
        code = generate(config)
        write_source(config.output, code, sys.stdout)
    except IfaceGenError as e:
        logger.error("%s", e)
        logger.debug("generation failed", exc_info=True)
        return EXIT_ERROR

    return EXIT_OK
