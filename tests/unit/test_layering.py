"""Layer dependency rules of the ifacegen package itself.

domain <- application <- infrastructure <- presentation: a layer may
import only from layers to its left.
"""

from __future__ import annotations

import ast
from dataclasses import fields, is_dataclass
from pathlib import Path

import pytest

import ifacegen.domain.model as model

PACKAGE_ROOT = Path(__file__).parent.parent.parent / "src" / "ifacegen"

LAYERS = ("domain", "application", "infrastructure", "presentation")

# third-party roots allowed per layer
EXTERNAL = {
    "domain": frozenset(),
    "application": frozenset(),
    "infrastructure": frozenset({"tree_sitter", "tree_sitter_go"}),
    "presentation": frozenset({"rich"}),
}

STDLIB_ALLOWED_IN_DOMAIN = frozenset(
    {"__future__", "abc", "collections", "dataclasses", "enum", "pathlib", "re", "typing"}
)


def imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    names: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            names.add(node.module)
    return names


def layer_files(layer: str) -> list[Path]:
    return sorted((PACKAGE_ROOT / layer).rglob("*.py"))


class TestLayerDependencies:
    """Each layer only depends inward."""

    @pytest.mark.parametrize("layer", LAYERS)
    def test_no_outward_imports(self, layer: str) -> None:
        forbidden = LAYERS[LAYERS.index(layer) + 1 :]
        offenders = [
            f"{path.relative_to(PACKAGE_ROOT)}: {name}"
            for path in layer_files(layer)
            for name in imported_modules(path)
            if any(name.startswith(f"ifacegen.{other}") for other in forbidden)
        ]
        assert offenders == []

    @pytest.mark.parametrize("layer", ["domain", "application"])
    def test_inner_layers_have_no_third_party_imports(self, layer: str) -> None:
        for path in layer_files(layer):
            roots = {name.split(".")[0] for name in imported_modules(path)}
            assert not roots & {"rich", "tree_sitter", "tree_sitter_go"}, path

    def test_domain_uses_small_stdlib_subset(self) -> None:
        for path in layer_files("domain"):
            roots = {name.split(".")[0] for name in imported_modules(path)} - {"ifacegen"}
            assert roots <= STDLIB_ALLOWED_IN_DOMAIN, f"{path}: {roots - STDLIB_ALLOWED_IN_DOMAIN}"

    def test_third_party_only_where_declared(self) -> None:
        third_party = {"rich", "tree_sitter", "tree_sitter_go"}
        for layer in LAYERS:
            for path in layer_files(layer):
                roots = {name.split(".")[0] for name in imported_modules(path)}
                assert roots & third_party <= EXTERNAL[layer], path


class TestDomainImmutability:
    """Domain value objects are frozen dataclasses; SymbolTable is the one builder."""

    @pytest.mark.parametrize(
        "name",
        [n for n in model.__all__ if is_dataclass(getattr(model, n)) and n != "SymbolTable"],
    )
    def test_frozen(self, name: str) -> None:
        cls = getattr(model, name)
        assert cls.__dataclass_params__.frozen, name
        assert fields(cls)
