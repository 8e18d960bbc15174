"""Qualifier: which package prefix a type gets in the destination package."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ifacegen.domain.model.package import Package, PackageIdentity
    from ifacegen.domain.model.type_expr import Qualifier

logger = logging.getLogger(__name__)


def destination_identity(package: Package, *, in_test: bool) -> PackageIdentity:
    """Identity of the destination package, `_test` variant if requested."""
    identity = package.identity
    if in_test:
        return identity.in_test()
    return identity


def new_qualifier(destination: PackageIdentity) -> Qualifier:
    """Build the qualifier for code living in `destination`.

    A package is "the same" as the destination when the import paths
    match or the display names match; it then gets no prefix. Otherwise
    the prefix is its own display name.

    The returned function is pure: same input, same answer.
    """

    def qualify(package: PackageIdentity) -> str:
        if package.import_path == destination.import_path:
            return ""
        if package.display_name == destination.display_name:
            return ""
        return package.display_name

    logger.debug("qualifying against %s", destination)
    return qualify
