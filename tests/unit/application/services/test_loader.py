"""Tests for application/services/loader.py."""

from pathlib import Path

import pytest

from ifacegen.application.services.loader import PackageLoader
from ifacegen.domain.exceptions.locating import PackageNotFoundError
from ifacegen.domain.model.symbol_table import SymbolTable
from tests.factories import IO, make_package
from tests.fakes import FakeImporter, FakeIndex


def make_loader() -> tuple[PackageLoader, FakeImporter, FakeIndex]:
    io = make_package("io", directory=Path("/goroot/src/io"))
    importer = FakeImporter(by_path={"io": io})
    index = FakeIndex({"io": SymbolTable(IO)})
    return PackageLoader(importer, index, Path("/work")), importer, index


class TestPackageLoader:
    """Tests for PackageLoader."""

    def test_locate_cached(self) -> None:
        loader, importer, _ = make_loader()
        assert loader.locate("io") is loader.locate("io")
        assert importer.calls == ["io"]

    def test_table_for_indexes_once(self) -> None:
        loader, _, index = make_loader()
        first = loader.table_for(IO)
        assert loader.table_for(IO) is first
        assert index.indexed == ["io"]

    def test_locate_missing_raises(self) -> None:
        loader, _, _ = make_loader()
        with pytest.raises(PackageNotFoundError):
            loader.locate("example.com/missing")

    def test_package_name_from_disk(self) -> None:
        loader, _, _ = make_loader()
        assert loader.package_name("io") == "io"

    def test_package_name_guessed_when_missing(self) -> None:
        loader, _, _ = make_loader()
        assert loader.package_name("gopkg.in/yaml.v3") == "yaml"

    def test_package_name_cgo(self) -> None:
        loader, importer, _ = make_loader()
        assert loader.package_name("C") == "C"
        assert importer.calls == []
