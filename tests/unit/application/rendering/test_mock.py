"""Tests for application/rendering/mock.py."""

import pytest

from ifacegen.application.rendering import render
from ifacegen.application.rendering.mock import call_constant, render_mock
from ifacegen.domain.exceptions.output import RenderError
from ifacegen.domain.model.interface_spec import InterfaceSpec
from ifacegen.domain.model.package import PackageIdentity
from tests.factories import CONTEXT, HTTP, make_method_spec

READ = make_method_spec("Read", (("p", "[]byte"),), (("n", "int"), ("err", "error")))

READER_MOCK = """\
// Code generated by ifacegen. DO NOT EDIT.

package shapes

import (
\t"sync/atomic"
)

const (
\tcallReaderMockRead = 0
)

// ReaderMock is a mock implementation of Reader.
type ReaderMock struct {
\t// PanicIfNotMocked makes calls to methods without a mock function panic.
\tPanicIfNotMocked bool

\tReadMock func(p []byte) (n int, err error)

\tcallCounts [1]int32
}

func (m *ReaderMock) Read(p []byte) (n int, err error) {
\tatomic.AddInt32(&m.callCounts[callReaderMockRead], 1)
\tif m.ReadMock == nil {
\t\tif m.PanicIfNotMocked {
\t\t\tpanic("ReaderMock.Read is not mocked")
\t\t}
\t\treturn n, err
\t}
\treturn m.ReadMock(p)
}

// ReadCallCount returns the number of calls to Read.
func (m *ReaderMock) ReadCallCount() int {
\treturn int(atomic.LoadInt32(&m.callCounts[callReaderMockRead]))
}
"""


def reader_spec(**overrides: object) -> InterfaceSpec:
    fields: dict[str, object] = {
        "interface_name": "Reader",
        "receiver": "*ReaderMock",
        "package_name": "shapes",
        "methods": (READ,),
    }
    fields.update(overrides)
    return InterfaceSpec(**fields)  # type: ignore[arg-type]


class TestRenderMock:
    """Tests for render_mock."""

    def test_reader(self) -> None:
        assert render_mock(reader_spec()) == READER_MOCK

    def test_dispatch_with_package_is_mock(self) -> None:
        assert render(reader_spec()) == READER_MOCK

    def test_stub_spec_rejected(self) -> None:
        with pytest.raises(RenderError, match="execute template:mock"):
            render_mock(reader_spec(package_name=""))

    def test_no_results_bare_return_and_call(self) -> None:
        close = make_method_spec("Reset", (("n", "int"),))
        code = render_mock(reader_spec(methods=(close,)))
        assert "\t\treturn\n" in code
        assert "\tm.ResetMock(n)\n}" in code

    def test_variadic_forwarded(self) -> None:
        printf = make_method_spec("Printf", (("format", "string"), ("args", "any")), variadic=True)
        code = render_mock(reader_spec(methods=(printf,)))
        assert "func (m *ReaderMock) Printf(format string, args ...any) {" in code
        assert "m.PrintfMock(format, args...)" in code

    def test_constants_sequential(self) -> None:
        methods = (READ, make_method_spec("Close", results=(("err", "error"),)))
        code = render_mock(reader_spec(methods=methods))
        assert "\tcallReaderMockRead = 0\n\tcallReaderMockClose = 1\n" in code
        assert "callCounts [2]int32" in code

    def test_empty_interface(self) -> None:
        code = render_mock(reader_spec(methods=()))
        assert "const (" not in code
        assert "import" not in code
        assert "callCounts [0]int32" in code
        assert code.startswith(
            "// Code generated by ifacegen. DO NOT EDIT.\n\npackage shapes\n\n// ReaderMock is a mock"
        )

    def test_foreign_imports_grouped(self) -> None:
        yaml = PackageIdentity("gopkg.in/yaml.v3", "yaml")
        serve = make_method_spec(
            "Serve",
            (("ctx", "context.Context"), ("r", "*http.Request"), ("n", "*yaml.Node")),
            imports=frozenset({CONTEXT, HTTP, yaml}),
        )
        code = render_mock(reader_spec(methods=(serve,)))
        assert 'import (\n\t"context"\n\t"net/http"\n\t"sync/atomic"\n\n\t"gopkg.in/yaml.v3"\n)' in code

    def test_atomic_alias_on_clash(self) -> None:
        other_atomic = PackageIdentity("go.uber.org/atomic", "atomic")
        load = make_method_spec("Load", results=(("r0", "*atomic.Int64"),), imports=frozenset({other_atomic}))
        code = render_mock(reader_spec(methods=(load,)))
        assert 'syncatomic "sync/atomic"' in code
        assert "syncatomic.AddInt32(" in code
        assert '"go.uber.org/atomic"' in code

    def test_atomic_alias_when_parameter_shadows_it(self) -> None:
        flag = make_method_spec("Set", (("atomic", "bool"),))
        code = render_mock(reader_spec(methods=(flag,)))
        assert 'import (\n\tsyncatomic "sync/atomic"\n)' in code
        assert "func (m *ReaderMock) Set(atomic bool) {\n\tsyncatomic.AddInt32(" in code
        assert "\tatomic.AddInt32(" not in code

    def test_atomic_alias_when_result_shadows_it(self) -> None:
        load = make_method_spec("Load", results=(("atomic", "int64"),))
        code = render_mock(reader_spec(methods=(load,)))
        assert "syncatomic.LoadInt32(" in code

    def test_receiver_var_avoids_params(self) -> None:
        spec = reader_spec(methods=(make_method_spec("Set", (("m", "int"),)),))
        code = render_mock(spec)
        assert "func (mock *ReaderMock) Set(m int) {" in code
        assert "mock.SetMock(m)" in code

    def test_call_constant(self) -> None:
        spec = reader_spec()
        assert call_constant(spec, READ) == "callReaderMockRead"
