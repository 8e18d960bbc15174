"""Domain ports (interfaces)."""

from ifacegen.domain.ports.package_importer import PackageImporterPort
from ifacegen.domain.ports.source_formatter import SourceFormatterPort
from ifacegen.domain.ports.symbol_index import PackageNamer, SymbolIndexPort

__all__ = [
    "PackageImporterPort",
    "SymbolIndexPort",
    "PackageNamer",
    "SourceFormatterPort",
]
