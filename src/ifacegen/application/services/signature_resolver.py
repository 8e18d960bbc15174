"""Signature resolver: interface methods -> render-ready MethodSpecs.

Types are rendered through the qualifier of the destination package.
Anonymous parameters and results get synthesized names so the generated
code can refer to them:

- the first anonymous result or parameter of type `error` is `err`
- every other anonymous one is `a<i>` (parameters) or `r<i>` (results),
  `i` being its position in the declared tuple
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ifacegen.domain.model.interface_spec import Field, MethodSpec

if TYPE_CHECKING:
    from ifacegen.domain.model.declaration import InterfaceShape, Method, Signature, Var
    from ifacegen.domain.model.package import PackageIdentity
    from ifacegen.domain.model.type_expr import Qualifier

PARAM_PREFIX = "a"
RESULT_PREFIX = "r"
ERROR_TYPE = "error"
ERROR_NAME = "err"
BLANK = "_"


def resolve_methods(shape: InterfaceShape, qualifier: Qualifier) -> tuple[MethodSpec, ...]:
    """One MethodSpec per interface method, in method-set order."""
    return tuple(resolve_method(method, qualifier) for method in shape.methods)


def resolve_method(method: Method, qualifier: Qualifier) -> MethodSpec:
    """Render one method's signature, parameters and results."""
    signature = method.signature
    imports: set[PackageIdentity] = set()
    for var in (*signature.params, *signature.results):
        imports |= var.type.packages(qualifier)

    result_names = frozenset(v.name for v in signature.results if v.name and v.name != BLANK)
    params = synthesize_fields(signature.params, qualifier, PARAM_PREFIX, reserved=result_names)
    results = synthesize_fields(
        signature.results,
        qualifier,
        RESULT_PREFIX,
        reserved=frozenset(f.name for f in params),
    )

    return MethodSpec(
        name=method.name,
        signature=render_signature(signature, qualifier),
        params=params,
        results=results,
        imports=frozenset(imports),
    )


def synthesize_fields(
    variables: tuple[Var, ...],
    qualifier: Qualifier,
    prefix: str,
    reserved: frozenset[str] = frozenset(),
) -> tuple[Field, ...]:
    """Name every entry of a parameter or result tuple.

    Explicit names are kept verbatim. `_` counts as anonymous since it
    cannot be forwarded or returned.

    Args:
        variables: Tuple in declaration order
        qualifier: Renders type names for the destination package
        prefix: PARAM_PREFIX or RESULT_PREFIX
        reserved: Names already used by the other tuple of the signature

    Returns:
        Fields, same count and order as variables
    """
    taken = {v.name for v in variables if v.name and v.name != BLANK} | reserved
    err_used = ERROR_NAME in taken

    fields: list[Field] = []
    for i, var in enumerate(variables):
        type_text = var.type.render(qualifier)
        name = var.name

        if not name or name == BLANK:
            if type_text == ERROR_TYPE and not err_used:
                err_used = True
                name = ERROR_NAME
            else:
                name = f"{prefix}{i}"
                while name in taken:
                    name += "_"
            taken.add(name)

        fields.append(Field(name=name, type=type_text, variadic=var.variadic))

    return tuple(fields)


def render_signature(signature: Signature, qualifier: Qualifier) -> str:
    """Function type text, e.g. `func(p []byte) (n int, err error)`.

    A single anonymous result is not parenthesized: `func() error`.
    """
    text = f"func({_render_tuple(signature.params, qualifier)})"

    results = signature.results
    if not results:
        return text
    if len(results) == 1 and not results[0].name:
        return f"{text} {results[0].type.render(qualifier)}"
    return f"{text} ({_render_tuple(results, qualifier)})"


def _render_tuple(variables: tuple[Var, ...], qualifier: Qualifier) -> str:
    parts: list[str] = []
    for var in variables:
        type_text = var.type.render(qualifier)
        if var.variadic:
            type_text = "..." + type_text
        parts.append(f"{var.name} {type_text}" if var.name else type_text)
    return ", ".join(parts)
