"""Application services.

Generator is the main facade; the other modules are its pipeline stages.
"""

from ifacegen.application.services.generator import Generator, build_interface_spec
from ifacegen.application.services.interface_resolver import InterfaceResolver
from ifacegen.application.services.loader import PackageLoader
from ifacegen.application.services.locator import destination_package, resolve_package
from ifacegen.application.services.qualifier import destination_identity, new_qualifier
from ifacegen.application.services.signature_resolver import (
    render_signature,
    resolve_method,
    resolve_methods,
    synthesize_fields,
)

__all__ = [
    "Generator",
    "build_interface_spec",
    "InterfaceResolver",
    "PackageLoader",
    "resolve_package",
    "destination_package",
    "new_qualifier",
    "destination_identity",
    "resolve_methods",
    "resolve_method",
    "synthesize_fields",
    "render_signature",
]
