"""Domain model."""

from ifacegen.domain.model.configuration import GeneratorConfig
from ifacegen.domain.model.declaration import (
    GenericRef,
    InterfaceElement,
    InterfaceShape,
    Method,
    Signature,
    TypeDecl,
    Var,
)
from ifacegen.domain.model.enums import FormatterChoice, GenerationMode, TypeKind
from ifacegen.domain.model.identifier import InterfaceIdentifier
from ifacegen.domain.model.interface_spec import Field, InterfaceSpec, MethodSpec
from ifacegen.domain.model.location import Location
from ifacegen.domain.model.package import Package, PackageIdentity, assumed_package_name
from ifacegen.domain.model.symbol_table import SymbolTable
from ifacegen.domain.model.type_expr import Qualifier, TypeExpr, TypeRef

__all__ = [
    # Enums
    "GenerationMode",
    "TypeKind",
    "FormatterChoice",
    # Value objects
    "Location",
    "PackageIdentity",
    "Package",
    "assumed_package_name",
    "TypeRef",
    "TypeExpr",
    "Qualifier",
    "Var",
    "Signature",
    "Method",
    "GenericRef",
    "InterfaceElement",
    "TypeDecl",
    "InterfaceShape",
    "InterfaceIdentifier",
    # Index
    "SymbolTable",
    # Render data
    "Field",
    "MethodSpec",
    "InterfaceSpec",
    # Configuration
    "GeneratorConfig",
]
