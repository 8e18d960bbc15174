"""Source formatters."""

from ifacegen.domain.model.enums import FormatterChoice
from ifacegen.domain.ports.source_formatter import SourceFormatterPort
from ifacegen.infrastructure.formatters.gofmt import (
    GOFMT,
    GOIMPORTS,
    AutoFormatter,
    GoToolFormatter,
)
from ifacegen.infrastructure.formatters.passthrough import PassthroughFormatter


def select_formatter(choice: FormatterChoice) -> SourceFormatterPort:
    """Formatter for a CLI choice."""
    match choice:
        case FormatterChoice.NONE:
            return PassthroughFormatter()
        case FormatterChoice.GOFMT:
            return GoToolFormatter(GOFMT)
        case FormatterChoice.GOIMPORTS:
            return GoToolFormatter(GOIMPORTS)
        case FormatterChoice.AUTO:
            return AutoFormatter()
    raise ValueError(f"unknown formatter choice: {choice!r}")


__all__ = [
    "AutoFormatter",
    "GoToolFormatter",
    "PassthroughFormatter",
    "select_formatter",
]
