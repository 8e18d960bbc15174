"""Go build environment: roots and target platform."""

from __future__ import annotations

import os
import platform
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

# sys.platform prefix -> GOOS
_HOST_OS = (
    ("linux", "linux"),
    ("darwin", "darwin"),
    ("win32", "windows"),
    ("cygwin", "windows"),
    ("freebsd", "freebsd"),
    ("openbsd", "openbsd"),
    ("netbsd", "netbsd"),
    ("sunos", "solaris"),
    ("aix", "aix"),
)

# platform.machine() (lowercased) -> GOARCH
_HOST_ARCH = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv6l": "arm",
    "armv7l": "arm",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


@dataclass(frozen=True, slots=True)
class BuildContext:
    """Where Go packages live and which platform files are selected for.

    Attributes:
        goroot: Go installation, None if unknown
        gopath: GOPATH entries in order
        goos: Target operating system
        goarch: Target architecture
        gomodcache: Module download cache, None if unknown
    """

    goroot: Path | None
    gopath: tuple[Path, ...]
    goos: str
    goarch: str
    gomodcache: Path | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.goos:
            raise ValueError("goos must not be empty")
        if not self.goarch:
            raise ValueError("goarch must not be empty")

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> BuildContext:
        """Build from GOROOT, GOPATH, GOOS, GOARCH, GOMODCACHE.

        Unset variables get the go command's defaults: GOROOT next to the
        `go` binary on PATH, GOPATH `~/go`, host OS/arch, module cache
        under the first GOPATH entry.
        """
        env = os.environ if environ is None else environ

        goroot = Path(env["GOROOT"]) if env.get("GOROOT") else _goroot_from_path()
        gopath = tuple(Path(p) for p in env.get("GOPATH", "").split(os.pathsep) if p)
        if not gopath:
            gopath = (Path.home() / "go",)
        gomodcache = Path(env["GOMODCACHE"]) if env.get("GOMODCACHE") else gopath[0] / "pkg" / "mod"

        return cls(
            goroot=goroot,
            gopath=gopath,
            goos=env.get("GOOS") or host_goos(),
            goarch=env.get("GOARCH") or host_goarch(),
            gomodcache=gomodcache,
        )


def host_goos() -> str:
    """GOOS of the running machine."""
    for prefix, goos in _HOST_OS:
        if sys.platform.startswith(prefix):
            return goos
    return sys.platform


def host_goarch() -> str:
    """GOARCH of the running machine."""
    machine = platform.machine().lower()
    return _HOST_ARCH.get(machine, machine or "amd64")


def _goroot_from_path() -> Path | None:
    """GOROOT of the `go` binary on PATH (`<goroot>/bin/go`)."""
    go = shutil.which("go")
    if go is None:
        return None
    goroot = Path(go).resolve().parent.parent
    if (goroot / "src").is_dir():
        return goroot
    return None
