"""Application layer for interface code generation.

- services: pipeline stages and the Generator facade
- rendering: stub and mock templates
"""

from ifacegen.application.rendering import render, render_mock, render_stub
from ifacegen.application.services import (
    Generator,
    InterfaceResolver,
    PackageLoader,
    new_qualifier,
    resolve_methods,
    resolve_package,
)

__all__ = [
    "Generator",
    "InterfaceResolver",
    "PackageLoader",
    "new_qualifier",
    "resolve_methods",
    "resolve_package",
    "render",
    "render_mock",
    "render_stub",
]
