"""Mock template: call-counting, per-method overridable implementation.

For every method the generated struct has a `<Method>Mock` function
field. A call increments the method's counter atomically, then forwards
to the field, or returns zero values (panics when PanicIfNotMocked) if
the field is nil. `<Method>CallCount()` reads the counter atomically.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ifacegen.application.rendering.imports import (
    ImportLine,
    collect_imports,
    import_for,
    render_import_block,
)
from ifacegen.domain.exceptions.output import RenderError
from ifacegen.domain.model.enums import GenerationMode

if TYPE_CHECKING:
    from ifacegen.domain.model.interface_spec import InterfaceSpec, MethodSpec
    from ifacegen.domain.model.package import PackageIdentity

TEMPLATE_NAME = "mock"

HEADER = "// Code generated by ifacegen. DO NOT EDIT."
ATOMIC_PATH = "sync/atomic"
ATOMIC_NAME = "atomic"
ATOMIC_ALIAS = "syncatomic"
PANIC_FLAG = "PanicIfNotMocked"
COUNTS_FIELD = "callCounts"
MOCK_FIELD_SUFFIX = "Mock"
CALL_COUNT_SUFFIX = "CallCount"

_TYPE_ARGS = re.compile(r"\[.*$")


def render_mock(spec: InterfaceSpec) -> str:
    """Complete Go source file with the mock struct.

    Raises:
        RenderError: If spec has no destination package name
    """
    if spec.mode is not GenerationMode.MOCK:
        raise RenderError(TEMPLATE_NAME, "destination package name is required")

    packages = collect_imports(spec.methods)
    imports = [import_for(p) for p in packages]
    atomic = _atomic_name(spec, packages)
    if spec.methods:
        imports.append(ImportLine(ATOMIC_PATH, "" if atomic == ATOMIC_NAME else atomic))

    out = [HEADER, "", f"package {spec.package_name}", ""]
    block = render_import_block(imports)
    if block:
        out.extend([*block, ""])
    out.extend(_render_constants(spec))
    out.extend(_render_struct(spec))
    for method in spec.methods:
        out.append("")
        out.extend(_render_method(spec, method, atomic))
        out.append("")
        out.extend(_render_call_count(spec, method, atomic))

    return "\n".join(out) + "\n"


def _atomic_name(spec: InterfaceSpec, packages: tuple[PackageIdentity, ...]) -> str:
    """`atomic`, or an alias when another package or a local name is called that."""
    if any(p.display_name == ATOMIC_NAME and p.import_path != ATOMIC_PATH for p in packages):
        return ATOMIC_ALIAS
    if any(ATOMIC_NAME in m.names for m in spec.methods):
        return ATOMIC_ALIAS
    return ATOMIC_NAME


def call_constant(spec: InterfaceSpec, method: MethodSpec) -> str:
    """Index constant of a method's counter slot."""
    return f"call{_TYPE_ARGS.sub('', spec.struct_name)}{method.name}"


def _render_constants(spec: InterfaceSpec) -> list[str]:
    if not spec.methods:
        return []
    out = ["const ("]
    out.extend(f"\t{call_constant(spec, m)} = {i}" for i, m in enumerate(spec.methods))
    out.extend([")", ""])
    return out


def _render_struct(spec: InterfaceSpec) -> list[str]:
    struct = spec.struct_name
    out = [
        f"// {_TYPE_ARGS.sub('', struct)} is a mock implementation of {spec.interface_name}.",
        f"type {struct} struct {{",
        f"\t// {PANIC_FLAG} makes calls to methods without a mock function panic.",
        f"\t{PANIC_FLAG} bool",
        "",
    ]
    out.extend(f"\t{m.name}{MOCK_FIELD_SUFFIX} {m.signature}" for m in spec.methods)
    if spec.methods:
        out.append("")
    out.extend([f"\t{COUNTS_FIELD} [{len(spec.methods)}]int32", "}"])
    return out


def _render_method(spec: InterfaceSpec, method: MethodSpec, atomic: str) -> list[str]:
    m = spec.receiver_var
    field = f"{m}.{method.name}{MOCK_FIELD_SUFFIX}"
    results = f" ({method.result_decl})" if method.results else ""
    zero_return = f"return {method.result_names}" if method.results else "return"
    call = f"{field}({method.arg_names})"
    forward = f"return {call}" if method.results else call
    not_mocked = f"{_TYPE_ARGS.sub('', spec.struct_name)}.{method.name} is not mocked"

    return [
        f"func ({m} {spec.receiver}) {method.name}({method.param_decl}){results} {{",
        f"\t{atomic}.AddInt32(&{m}.{COUNTS_FIELD}[{call_constant(spec, method)}], 1)",
        f"\tif {field} == nil {{",
        f"\t\tif {m}.{PANIC_FLAG} {{",
        f'\t\t\tpanic("{not_mocked}")',
        "\t\t}",
        f"\t\t{zero_return}",
        "\t}",
        f"\t{forward}",
        "}",
    ]


def _render_call_count(spec: InterfaceSpec, method: MethodSpec, atomic: str) -> list[str]:
    m = spec.receiver_var
    name = f"{method.name}{CALL_COUNT_SUFFIX}"
    return [
        f"// {name} returns the number of calls to {method.name}.",
        f"func ({m} {spec.receiver}) {name}() int {{",
        f"\treturn int({atomic}.LoadInt32(&{m}.{COUNTS_FIELD}[{call_constant(spec, method)}]))",
        "}",
    ]
