"""Tests for application/services/generator.py."""

from pathlib import Path

import pytest

from ifacegen.application.services.generator import Generator, build_interface_spec
from ifacegen.domain.exceptions.identifier import MalformedIdentifierError
from ifacegen.domain.exceptions.resolving import InterfaceNotFoundError
from ifacegen.domain.model.configuration import GeneratorConfig
from ifacegen.domain.model.enums import GenerationMode
from ifacegen.domain.model.type_expr import TypeExpr
from tests.factories import (
    IO,
    SHAPES,
    make_interface,
    make_method,
    make_package,
    make_table,
    var,
)
from tests.fakes import FakeImporter, FakeIndex, RecordingFormatter

WORK = Path("/src/shapes")

READ = make_method("Read", (var("p", TypeExpr.literal("[]byte")),), (var("n", "int"), var("err", "error")))
AREA = make_method("Area", results=(var("", "float64"),))


def make_generator() -> tuple[Generator, RecordingFormatter]:
    shapes = make_package("example.com/shapes", directory=WORK)
    io = make_package("io", directory=Path("/goroot/src/io"))
    importer = FakeImporter(by_path={"io": io}, by_dir={WORK: shapes})
    index = FakeIndex(
        {
            "io": make_table(IO, make_interface("Reader", IO, READ)),
            "example.com/shapes": make_table(SHAPES, make_interface("Shape", SHAPES, AREA)),
        }
    )
    formatter = RecordingFormatter()
    return Generator(importer, index, formatter, work_dir=WORK), formatter


class TestGenerate:
    """Tests for Generator.generate."""

    def test_stub_for_local_interface(self) -> None:
        generator, formatter = make_generator()
        code = generator.generate(GeneratorConfig(interface="Shape"))
        assert code == "\nfunc (m *ShapeGen) Area() (r0 float64) {\n}\n"
        assert formatter.calls == [(code, False)]

    def test_stub_for_foreign_interface(self) -> None:
        generator, _ = make_generator()
        code = generator.generate(GeneratorConfig(interface="io.Reader"))
        assert "func (m *ReaderGen) Read(p []byte) (n int, err error) {\n}" in code

    def test_receiver_override(self) -> None:
        generator, _ = make_generator()
        code = generator.generate(GeneratorConfig(interface="Shape", receiver="circle"))
        assert code.startswith("\nfunc (m circle) Area()")

    def test_mock_uses_destination_package(self) -> None:
        generator, formatter = make_generator()
        code = generator.generate(GeneratorConfig(interface="io.Reader", mock=True))
        assert "package shapes\n" in code
        assert "type ReaderMock struct {" in code
        assert formatter.calls[-1][1] is True

    def test_mock_in_test_package(self) -> None:
        generator, _ = make_generator()
        code = generator.generate(GeneratorConfig(interface="Shape", mock=True, mock_in_test=True))
        assert "package shapes_test\n" in code
        assert "AreaMock func() float64" in code

    def test_missing_interface(self) -> None:
        generator, _ = make_generator()
        with pytest.raises(InterfaceNotFoundError):
            generator.generate(GeneratorConfig(interface="io.Writer"))

    def test_malformed_identifier(self) -> None:
        generator, formatter = make_generator()
        with pytest.raises(MalformedIdentifierError):
            generator.generate(GeneratorConfig(interface="a.b/c"))
        assert formatter.calls == []


class TestBuildInterfaceSpec:
    """Tests for build_interface_spec."""

    def test_default_stub_receiver(self) -> None:
        spec = build_interface_spec(
            interface_name="Reader",
            mode=GenerationMode.STUB,
            receiver="",
            package_name="io",
            methods=(),
        )
        assert spec.receiver == "*ReaderGen"
        assert spec.package_name == ""
        assert spec.mode is GenerationMode.STUB

    def test_default_mock_receiver(self) -> None:
        spec = build_interface_spec(
            interface_name="Reader",
            mode=GenerationMode.MOCK,
            receiver="",
            package_name="shapes",
            methods=(),
        )
        assert spec.receiver == "*ReaderMock"
        assert spec.mode is GenerationMode.MOCK
