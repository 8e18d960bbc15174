"""Go build environment: context, constraints, go.mod, importer."""

from ifacegen.infrastructure.build.constraints import BuildConstraints, FileHeader, read_header
from ifacegen.infrastructure.build.context import BuildContext
from ifacegen.infrastructure.build.gomod import GoMod, find_go_mod, parse_go_mod
from ifacegen.infrastructure.build.importer import GoPackageImporter

__all__ = [
    "BuildContext",
    "BuildConstraints",
    "FileHeader",
    "read_header",
    "GoMod",
    "find_go_mod",
    "parse_go_mod",
    "GoPackageImporter",
]
