"""Renderers: InterfaceSpec -> Go source text.

Two fixed templates, selected by InterfaceSpec.mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ifacegen.application.rendering.mock import render_mock
from ifacegen.application.rendering.stub import render_stub
from ifacegen.domain.model.enums import GenerationMode

if TYPE_CHECKING:
    from ifacegen.domain.model.interface_spec import InterfaceSpec


def render(spec: InterfaceSpec) -> str:
    """Render with the mock template when a destination package is named, else stubs."""
    if spec.mode is GenerationMode.MOCK:
        return render_mock(spec)
    return render_stub(spec)


__all__ = [
    "render",
    "render_mock",
    "render_stub",
]
