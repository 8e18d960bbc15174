"""go.mod: main module path, requirements and local replacements."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

GO_MOD = "go.mod"

_COMMENT = re.compile(r"//.*$")
_UPPER = re.compile(r"[A-Z]")


@dataclass(frozen=True, slots=True)
class GoMod:
    """Parsed go.mod of the main module.

    Attributes:
        root: Directory holding go.mod
        module: Module path
        requires: Module path -> version
        replaces: Module path -> replacement (local directory or
            `path@version`)
    """

    root: Path
    module: str
    requires: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    replaces: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.module:
            raise ValueError(f"{self.root / GO_MOD}: module path must not be empty")

    def owns(self, import_path: str) -> bool:
        """Import path is inside the main module."""
        return import_path == self.module or import_path.startswith(self.module + "/")

    def dir_in_main_module(self, import_path: str) -> Path:
        """Directory of a main-module package."""
        return self.root / import_path.removeprefix(self.module).lstrip("/")

    def dependency_dir(self, import_path: str, modcache: Path | None) -> Path | None:
        """Directory of a package from a required module, None if unknown.

        The longest module path that prefixes import_path wins. Local
        `replace` targets are used as-is, everything else is looked up
        in the module cache.
        """
        module = _longest_prefix(import_path, (*self.replaces, *self.requires))
        if module is None:
            return None
        rest = import_path.removeprefix(module).lstrip("/")

        replacement = self.replaces.get(module)
        if replacement is not None:
            if replacement.startswith((".", "/")):
                return (self.root / replacement / rest).resolve()
            target, _, version = replacement.partition("@")
            return _cached(modcache, target, version, rest)

        return _cached(modcache, module, self.requires[module], rest)


def find_go_mod(start: Path) -> Path | None:
    """Nearest go.mod in start or its ancestors."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / GO_MOD
        if candidate.is_file():
            return candidate
    return None


def parse_go_mod(path: Path) -> GoMod:
    """Parse module, require and replace directives.

    Raises:
        OSError: If the file cannot be read
        ValueError: If there is no module directive
    """
    module = ""
    requires: dict[str, str] = {}
    replaces: dict[str, str] = {}
    block: str | None = None

    for raw in path.read_text(encoding="utf-8").splitlines():
        line = _COMMENT.sub("", raw).strip()
        if not line:
            continue

        if block is not None:
            if line == ")":
                block = None
                continue
            _directive(block, line, requires, replaces)
            continue

        verb, _, rest = line.partition(" ")
        rest = rest.strip()
        if verb == "module":
            module = _unquote(rest)
        elif verb in ("require", "replace"):
            if rest == "(":
                block = verb
            else:
                _directive(verb, rest, requires, replaces)

    return GoMod(
        root=path.parent,
        module=module,
        requires=MappingProxyType(requires),
        replaces=MappingProxyType(replaces),
    )


def escape_module_path(path: str) -> str:
    """Module cache escaping: upper-case letters become `!` + lower-case."""
    return _UPPER.sub(lambda m: "!" + m.group(0).lower(), path)


def _directive(verb: str, text: str, requires: dict[str, str], replaces: dict[str, str]) -> None:
    if verb == "require":
        parts = text.split()
        if len(parts) >= 2:
            requires[_unquote(parts[0])] = parts[1]
        return

    old, arrow, new = text.partition("=>")
    if not arrow:
        return
    old_parts = old.split()
    new_parts = new.split()
    if not old_parts or not new_parts:
        return
    target = _unquote(new_parts[0])
    if len(new_parts) > 1:
        target += "@" + new_parts[1]
    replaces[_unquote(old_parts[0])] = target


def _unquote(text: str) -> str:
    return text.strip().strip('"`')


def _longest_prefix(import_path: str, modules: tuple[str, ...]) -> str | None:
    best: str | None = None
    for module in modules:
        if import_path == module or import_path.startswith(module + "/"):
            if best is None or len(module) > len(best):
                best = module
    return best


def _cached(modcache: Path | None, module: str, version: str, rest: str) -> Path | None:
    if modcache is None or not version:
        return None
    return modcache / f"{escape_module_path(module)}@{version}" / rest
