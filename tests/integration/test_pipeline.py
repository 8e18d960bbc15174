"""End-to-end generation over temporary GOROOT / GOPATH / module trees."""

from pathlib import Path

import pytest

from ifacegen.domain.exceptions.locating import PackageNotFoundError
from ifacegen.domain.exceptions.resolving import InterfaceNotFoundError
from ifacegen.domain.model.configuration import GeneratorConfig
from ifacegen.domain.model.enums import FormatterChoice
from ifacegen.presentation.api import generate

IO_GO = """\
// Package io is a small stand-in for the standard library package.
package io

type Reader interface {
\tRead(p []byte) (n int, err error)
}

type Closer interface {
\tClose() error
}

type ReadCloser interface {
\tReader
\tCloser
}
"""

CONTEXT_GO = """\
package context

type Context interface {
\tDone() <-chan struct{}
\tErr() error
}
"""

STORE_GO = """\
package store

import (
\t"context"
\t"io"

\t"example.com/lib"
)

type Key string

type Store interface {
\tGet(ctx context.Context, key Key) (io.ReadCloser, error)
\tPut(context.Context, Key, io.Reader) error
\tWatch(keys ...Key) <-chan lib.Event
}
"""

LIB_GO = """\
package lib

type Event struct{ Name string }

type Sink interface {
\tEmit(e Event)
}
"""


def write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def workspace(tmp_path: Path) -> tuple[Path, dict[str, str]]:
    """GOROOT with io and context, a module app with a store package, lib vendored in the module."""
    goroot = tmp_path / "goroot"
    write(goroot / "src" / "io" / "io.go", IO_GO)
    write(goroot / "src" / "context" / "context.go", CONTEXT_GO)

    app = tmp_path / "app"
    write(app / "go.mod", "module example.com/app\n\ngo 1.22\n")
    write(app / "store" / "store.go", STORE_GO)
    write(app / "vendor" / "example.com" / "lib" / "lib.go", LIB_GO)
    (app / "mocks").mkdir()

    environ = {
        "GOROOT": str(goroot),
        "GOPATH": str(tmp_path / "gopath"),
        "GOOS": "linux",
        "GOARCH": "amd64",
    }
    return app, environ


def run(workspace: tuple[Path, dict[str, str]], work_dir: str, **config: object) -> str:
    app, environ = workspace
    return generate(
        GeneratorConfig(formatter=FormatterChoice.NONE, **config),  # type: ignore[arg-type]
        work_dir=app / work_dir,
        environ=environ,
    )


class TestStubs:
    """Stub generation."""

    def test_local_interface(self, workspace: tuple[Path, dict[str, str]]) -> None:
        code = run(workspace, "store", interface="Store")
        assert code == (
            "\n"
            "func (m *StoreGen) Get(ctx context.Context, key Key) (r0 io.ReadCloser, err error) {\n}\n"
            "\n"
            "func (m *StoreGen) Put(a0 context.Context, a1 Key, a2 io.Reader) (err error) {\n}\n"
            "\n"
            "func (m *StoreGen) Watch(keys ...Key) (r0 <-chan lib.Event) {\n}\n"
        )

    def test_goroot_interface_with_embeds(self, workspace: tuple[Path, dict[str, str]]) -> None:
        code = run(workspace, "store", interface="io.ReadCloser", receiver="*body")
        assert code == (
            "\n"
            "func (m *body) Read(p []byte) (n int, err error) {\n}\n"
            "\n"
            "func (m *body) Close() (err error) {\n}\n"
        )

    def test_vendored_interface(self, workspace: tuple[Path, dict[str, str]]) -> None:
        code = run(workspace, "store", interface="example.com/lib.Sink")
        assert code == "\nfunc (m *SinkGen) Emit(e lib.Event) {\n}\n"

    def test_local_relative_import(self, workspace: tuple[Path, dict[str, str]]) -> None:
        code = run(workspace, "mocks", interface="../store.Store")
        assert "func (m *StoreGen) Get(ctx context.Context, key store.Key)" in code


class TestMocks:
    """Mock generation."""

    def test_mock_into_empty_package(self, workspace: tuple[Path, dict[str, str]]) -> None:
        code = run(workspace, "mocks", interface="example.com/app/store.Store", mock=True)

        assert code.startswith("// Code generated by ifacegen. DO NOT EDIT.\n\npackage mocks\n")
        assert (
            'import (\n\t"context"\n\t"io"\n\t"sync/atomic"\n\n'
            '\t"example.com/app/store"\n\t"example.com/lib"\n)'
        ) in code
        assert "\tGetMock func(ctx context.Context, key store.Key) (io.ReadCloser, error)\n" in code
        assert "\tPutMock func(context.Context, store.Key, io.Reader) error\n" in code
        assert "\tWatchMock func(keys ...store.Key) <-chan lib.Event\n" in code
        assert "\treturn m.WatchMock(keys...)\n" in code
        assert "callCounts [3]int32" in code

    def test_mock_in_test_package(self, workspace: tuple[Path, dict[str, str]]) -> None:
        code = run(workspace, "store", interface="Store", mock=True, mock_in_test=True)
        assert "\npackage store_test\n" in code
        assert "GetMock func(ctx context.Context, key Key) (io.ReadCloser, error)" in code
        assert '"example.com/app/store"' not in code


class TestFailures:
    """Errors surface as domain exceptions."""

    def test_unknown_interface(self, workspace: tuple[Path, dict[str, str]]) -> None:
        with pytest.raises(InterfaceNotFoundError):
            run(workspace, "store", interface="io.Writer")

    def test_struct_is_not_an_interface(self, workspace: tuple[Path, dict[str, str]]) -> None:
        with pytest.raises(InterfaceNotFoundError):
            run(workspace, "store", interface="example.com/lib.Event")

    def test_unknown_package(self, workspace: tuple[Path, dict[str, str]]) -> None:
        with pytest.raises(PackageNotFoundError) as exc_info:
            run(workspace, "store", interface="example.com/nowhere.X")
        assert exc_info.value.searched


class TestOutsideModule:
    """Sibling directories with no go.mod and no GOPATH."""

    @pytest.fixture
    def loose(self, tmp_path: Path) -> tuple[Path, dict[str, str]]:
        goroot = tmp_path / "goroot"
        write(goroot / "src" / "io" / "io.go", IO_GO)
        work = tmp_path / "w"
        write(work / "store" / "store.go", "package store\n\ntype Item struct{}\n\ntype Store interface {\n\tGet() Item\n}\n")
        (work / "mocks").mkdir()
        environ = {"GOROOT": str(goroot), "GOPATH": str(tmp_path / "gopath"), "GOOS": "linux", "GOARCH": "amd64"}
        return work, environ

    def test_foreign_types_keep_their_prefix(self, loose: tuple[Path, dict[str, str]]) -> None:
        code = run(loose, "mocks", interface="../store.Store", mock=True)
        store_dir = (loose[0] / "store").resolve().as_posix()

        assert "\npackage mocks\n" in code
        assert f'\t"_{store_dir}"\n' in code
        assert "\tGetMock func() store.Item\n" in code
        assert "func (m *StoreMock) Get() (r0 store.Item) {" in code

    def test_same_directory_is_unqualified(self, loose: tuple[Path, dict[str, str]]) -> None:
        code = run(loose, "store", interface="Store")
        assert code == "\nfunc (m *StoreGen) Get() (r0 Item) {\n}\n"

    def test_generic_embed_expanded(self, loose: tuple[Path, dict[str, str]]) -> None:
        write(
            loose[0] / "store" / "repo.go",
            "package store\n\n"
            "type Base[T any] interface {\n\tGet() T\n}\n\n"
            "type Repo interface {\n\tBase[Item]\n\tOther()\n}\n",
        )
        code = run(loose, "mocks", interface="../store.Repo")
        assert code == (
            "\nfunc (m *RepoGen) Get() (r0 store.Item) {\n}\n"
            "\nfunc (m *RepoGen) Other() {\n}\n"
        )
