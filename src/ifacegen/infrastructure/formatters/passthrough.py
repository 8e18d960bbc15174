"""Formatter that leaves source untouched."""

from ifacegen.domain.ports.source_formatter import SourceFormatterPort


class PassthroughFormatter(SourceFormatterPort):
    """Returns rendered source as-is. The templates already emit gofmt layout."""

    def format(self, source: str, *, organize_imports: bool) -> str:
        """Return source unchanged."""
        return source
