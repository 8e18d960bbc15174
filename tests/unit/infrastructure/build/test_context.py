"""Tests for infrastructure/build/context.py."""

import os
from pathlib import Path

import pytest

from ifacegen.infrastructure.build.context import BuildContext, host_goarch, host_goos


class TestFromEnviron:
    """Tests for BuildContext.from_environ."""

    def test_explicit(self) -> None:
        context = BuildContext.from_environ(
            {
                "GOROOT": "/usr/local/go",
                "GOPATH": os.pathsep.join(["/a", "/b"]),
                "GOOS": "windows",
                "GOARCH": "arm64",
                "GOMODCACHE": "/cache",
            }
        )
        assert context.goroot == Path("/usr/local/go")
        assert context.gopath == (Path("/a"), Path("/b"))
        assert context.goos == "windows"
        assert context.goarch == "arm64"
        assert context.gomodcache == Path("/cache")

    def test_defaults(self) -> None:
        context = BuildContext.from_environ({"GOROOT": "/go"})
        assert context.gopath == (Path.home() / "go",)
        assert context.gomodcache == Path.home() / "go" / "pkg" / "mod"
        assert context.goos == host_goos()
        assert context.goarch == host_goarch()

    def test_empty_goos_rejected(self) -> None:
        with pytest.raises(ValueError, match="goos must not be empty"):
            BuildContext(goroot=None, gopath=(), goos="", goarch="amd64")
