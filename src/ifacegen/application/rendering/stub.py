"""Stub template: empty method bodies to be filled in by hand."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ifacegen.domain.model.interface_spec import InterfaceSpec, MethodSpec


def render_stub(spec: InterfaceSpec) -> str:
    """Declaration list, one empty method per interface method.

    No package clause and no imports: the output is pasted into an
    existing file.
    """
    receiver_var = spec.receiver_var
    blocks = [_render_method(receiver_var, spec.receiver, method) for method in spec.methods]
    return "\n" + "\n".join(blocks)


def _render_method(receiver_var: str, receiver: str, method: MethodSpec) -> str:
    results = f" ({method.result_decl})" if method.results else ""
    return f"func ({receiver_var} {receiver}) {method.name}({method.param_decl}){results} {{\n}}\n"
