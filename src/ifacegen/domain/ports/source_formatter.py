"""Source formatter port (interface)."""

from abc import ABC, abstractmethod


class SourceFormatterPort(ABC):
    """Port for normalizing generated Go source.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def format(self, source: str, *, organize_imports: bool) -> str:
        """Format source text.

        Args:
            source: Rendered source (complete file or declaration list)
            organize_imports: Add missing / drop unused imports if supported

        Returns:
            Formatted source

        Raises:
            FormatError: If the source is malformed
        """
        ...
