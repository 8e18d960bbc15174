"""Generator configuration.

Built once by the CLI from its flags. Immutable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ifacegen.domain.model.enums import FormatterChoice, GenerationMode


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Configuration for one generator run.

    Attributes:
        interface: `[import_path.]InterfaceName`
        receiver: Receiver type override; "" = `*{Interface}{Gen|Mock}`
        output: Destination file; None = standard output
        mock: Generate a mock struct instead of stubs
        mock_in_test: Destination is the package's `_test` variant
        formatter: Post-processing tool
    """

    interface: str
    receiver: str = ""
    output: Path | None = None
    mock: bool = False
    mock_in_test: bool = False
    formatter: FormatterChoice = FormatterChoice.AUTO

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.interface:
            raise ValueError("interface name is required")
        if self.receiver and not self.receiver.removeprefix("*"):
            raise ValueError(f"receiver must name a type, got {self.receiver!r}")

    @property
    def mode(self) -> GenerationMode:
        """Generation mode selected by the flags."""
        return GenerationMode.MOCK if self.mock else GenerationMode.STUB
