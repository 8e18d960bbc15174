"""Domain exceptions."""

from ifacegen.domain.exceptions.base import IfaceGenError
from ifacegen.domain.exceptions.identifier import MalformedIdentifierError
from ifacegen.domain.exceptions.locating import NoGoFilesError, PackageNotFoundError
from ifacegen.domain.exceptions.output import FormatError, RenderError, WriteError
from ifacegen.domain.exceptions.resolving import InterfaceNotFoundError, SourceParseError

__all__ = [
    "IfaceGenError",
    "MalformedIdentifierError",
    "PackageNotFoundError",
    "NoGoFilesError",
    "SourceParseError",
    "InterfaceNotFoundError",
    "RenderError",
    "FormatError",
    "WriteError",
]
