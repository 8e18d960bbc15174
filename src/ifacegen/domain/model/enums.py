"""Domain enumerations."""

from enum import Enum, auto


class GenerationMode(Enum):
    """What the renderer emits."""

    STUB = auto()  # empty method bodies
    MOCK = auto()  # counting, overridable mock struct


class TypeKind(Enum):
    """Shape of a declared type's right-hand side."""

    INTERFACE = auto()  # interface { ... }
    STRUCT = auto()  # struct { ... }
    NAMED = auto()  # type X Y / type X = pkg.Y, underlying found through Y
    OTHER = auto()  # func, map, slice, ...


class FormatterChoice(Enum):
    """Post-processing tool applied to rendered source."""

    AUTO = "auto"
    GOFMT = "gofmt"
    GOIMPORTS = "goimports"
    NONE = "none"
