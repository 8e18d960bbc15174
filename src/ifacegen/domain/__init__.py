"""ifacegen domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, re, collections.abc
"""

from ifacegen.domain.exceptions import (
    FormatError,
    IfaceGenError,
    InterfaceNotFoundError,
    MalformedIdentifierError,
    PackageNotFoundError,
    RenderError,
    SourceParseError,
    WriteError,
)
from ifacegen.domain.model import (
    Field,
    FormatterChoice,
    GenerationMode,
    GeneratorConfig,
    InterfaceIdentifier,
    InterfaceShape,
    InterfaceSpec,
    Method,
    MethodSpec,
    Package,
    PackageIdentity,
    Signature,
    SymbolTable,
    TypeDecl,
    TypeExpr,
    TypeKind,
    TypeRef,
    Var,
)
from ifacegen.domain.ports import (
    PackageImporterPort,
    SourceFormatterPort,
    SymbolIndexPort,
)

__all__ = [
    # Exceptions
    "IfaceGenError",
    "MalformedIdentifierError",
    "PackageNotFoundError",
    "SourceParseError",
    "InterfaceNotFoundError",
    "RenderError",
    "FormatError",
    "WriteError",
    # Enums
    "GenerationMode",
    "TypeKind",
    "FormatterChoice",
    # Value objects
    "PackageIdentity",
    "Package",
    "TypeRef",
    "TypeExpr",
    "Var",
    "Signature",
    "Method",
    "TypeDecl",
    "InterfaceShape",
    "InterfaceIdentifier",
    "SymbolTable",
    # Render data
    "Field",
    "MethodSpec",
    "InterfaceSpec",
    "GeneratorConfig",
    # Ports
    "PackageImporterPort",
    "SymbolIndexPort",
    "SourceFormatterPort",
]
