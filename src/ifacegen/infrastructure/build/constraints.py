"""Build constraints: which .go files belong to a build.

Covers the file-name rules (`_test`, `_GOOS`, `_GOARCH`, `_GOOS_GOARCH`)
and the `//go:build` / `// +build` lines of the file header.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

KNOWN_OS = frozenset(
    {
        "aix", "android", "darwin", "dragonfly", "freebsd", "hurd", "illumos", "ios", "js",
        "linux", "nacl", "netbsd", "openbsd", "plan9", "solaris", "wasip1", "windows", "zos",
    }
)  # fmt: skip

KNOWN_ARCH = frozenset(
    {
        "386", "amd64", "amd64p32", "arm", "armbe", "arm64", "arm64be", "loong64", "mips",
        "mipsle", "mips64", "mips64le", "mips64p32", "mips64p32le", "ppc", "ppc64",
        "ppc64le", "riscv", "riscv64", "s390", "s390x", "sparc", "sparc64", "wasm",
    }
)  # fmt: skip

UNIX_OS = frozenset(
    {
        "aix", "android", "darwin", "dragonfly", "freebsd", "hurd", "illumos", "ios",
        "linux", "netbsd", "openbsd", "solaris",
    }
)  # fmt: skip

# go1.1 ... go1.<MAX_GO_MINOR> are satisfied
MAX_GO_MINOR = 40

_GO_BUILD = re.compile(r"^//go:build\s+(.*)$")
_PLUS_BUILD = re.compile(r"^//\s*\+build\s+(.*)$")
_PACKAGE = re.compile(r"^package\s+([A-Za-z_]\w*)")
_TOKEN = re.compile(r"\s*(\(|\)|!|&&|\|\||[A-Za-z0-9_.]+)")


class ConstraintSyntaxError(ValueError):
    """Malformed `//go:build` expression."""


@dataclass(frozen=True, slots=True)
class FileHeader:
    """What the leading comments and package clause of a file say.

    Attributes:
        package: Package clause name, None if not found
        go_build: `//go:build` expression, None if absent
        plus_build: `// +build` lines (legacy syntax)
    """

    package: str | None
    go_build: str | None = None
    plus_build: tuple[str, ...] = ()


def read_header(source: str) -> FileHeader:
    """Scan comments up to the package clause.

    Block comments are skipped; constraint lines after the package
    clause are ignored, like the go command does.
    """
    go_build: str | None = None
    plus_build: list[str] = []
    in_block = False

    for raw in source.splitlines():
        line = raw.strip()
        if in_block:
            if "*/" in line:
                in_block = False
                line = line.split("*/", 1)[1].strip()
                if not line:
                    continue
            else:
                continue
        if not line:
            continue
        if line.startswith("/*"):
            if "*/" not in line[2:]:
                in_block = True
            continue
        if line.startswith("//"):
            if match := _GO_BUILD.match(line):
                go_build = go_build or match.group(1).strip()
            elif match := _PLUS_BUILD.match(line):
                plus_build.append(match.group(1).strip())
            continue
        if match := _PACKAGE.match(line):
            return FileHeader(match.group(1), go_build, tuple(plus_build))
        break

    return FileHeader(None, go_build, tuple(plus_build))


class BuildConstraints:
    """Evaluates constraints for one GOOS/GOARCH.

    Stateless after construction.
    """

    def __init__(self, goos: str, goarch: str, extra_tags: frozenset[str] = frozenset()) -> None:
        """Initialize with target platform.

        Args:
            goos: Target OS
            goarch: Target architecture
            extra_tags: Additional satisfied tags (`-tags`)
        """
        self._goos = goos
        self._goarch = goarch
        self._extra = extra_tags

    def match_tag(self, tag: str) -> bool:
        """Is a single build tag satisfied."""
        if tag in self._extra or tag in (self._goos, self._goarch, "gc"):
            return True
        if tag == "unix":
            return self._goos in UNIX_OS
        if tag == "linux" and self._goos == "android":
            return True
        if tag == "solaris" and self._goos == "illumos":
            return True
        if tag == "darwin" and self._goos == "ios":
            return True
        if tag.startswith("go1."):
            minor = tag.removeprefix("go1.")
            return minor.isdigit() and 1 <= int(minor) <= MAX_GO_MINOR
        return False

    def match_file_name(self, name: str) -> bool:
        """File-name rules: `x_GOOS.go`, `x_GOARCH.go`, `x_GOOS_GOARCH.go`."""
        stem = name.removesuffix(".go")
        i = stem.find("_")
        if i < 0:
            return True
        parts = stem[i:].split("_")
        if len(parts) >= 3 and parts[-2] in KNOWN_OS and parts[-1] in KNOWN_ARCH:
            return self.match_tag(parts[-2]) and self.match_tag(parts[-1])
        if parts[-1] in KNOWN_OS or parts[-1] in KNOWN_ARCH:
            return self.match_tag(parts[-1])
        return True

    def match_header(self, header: FileHeader) -> bool:
        """`//go:build` wins; otherwise every `// +build` line must hold.

        Raises:
            ConstraintSyntaxError: If the go:build expression is malformed
        """
        if header.go_build is not None:
            return self.eval(header.go_build)
        return all(self._eval_plus_build(line) for line in header.plus_build)

    def eval(self, expression: str) -> bool:
        """Evaluate a `//go:build` expression (`!`, `&&`, `||`, parentheses).

        Raises:
            ConstraintSyntaxError: If the expression is malformed
        """
        tokens = _tokenize(expression)
        value, pos = self._or(tokens, 0)
        if pos != len(tokens):
            raise ConstraintSyntaxError(f"unexpected {tokens[pos]!r} in {expression!r}")
        return value

    def _or(self, tokens: list[str], pos: int) -> tuple[bool, int]:
        value, pos = self._and(tokens, pos)
        while pos < len(tokens) and tokens[pos] == "||":
            right, pos = self._and(tokens, pos + 1)
            value = value or right
        return value, pos

    def _and(self, tokens: list[str], pos: int) -> tuple[bool, int]:
        value, pos = self._not(tokens, pos)
        while pos < len(tokens) and tokens[pos] == "&&":
            right, pos = self._not(tokens, pos + 1)
            value = value and right
        return value, pos

    def _not(self, tokens: list[str], pos: int) -> tuple[bool, int]:
        if pos >= len(tokens):
            raise ConstraintSyntaxError("unexpected end of expression")
        token = tokens[pos]
        if token == "!":
            value, pos = self._not(tokens, pos + 1)
            return not value, pos
        if token == "(":
            value, pos = self._or(tokens, pos + 1)
            if pos >= len(tokens) or tokens[pos] != ")":
                raise ConstraintSyntaxError("missing ')'")
            return value, pos + 1
        if token in (")", "&&", "||"):
            raise ConstraintSyntaxError(f"unexpected {token!r}")
        return self.match_tag(token), pos + 1

    def _eval_plus_build(self, line: str) -> bool:
        """Legacy syntax: spaces are OR, commas are AND, `!` negates."""
        for option in line.split():
            if all(self._plus_term(term) for term in option.split(",")):
                return True
        return False

    def _plus_term(self, term: str) -> bool:
        if term.startswith("!"):
            return not self.match_tag(term[1:])
        return self.match_tag(term)


def _tokenize(expression: str) -> list[str]:
    tokens: list[str] = []
    pos = 0
    expression = expression.rstrip()
    while pos < len(expression):
        match = _TOKEN.match(expression, pos)
        if match is None:
            raise ConstraintSyntaxError(f"invalid character at {pos} in {expression!r}")
        tokens.append(match.group(1))
        pos = match.end()
    return tokens
