"""Package locator: import path -> package, with vendor fallback.

Direct resolution is delegated to the importer port. When it fails, the
import path is retried under `vendor/` of the source directory and of
every ancestor up to the filesystem root.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import TYPE_CHECKING

from ifacegen.domain.exceptions.locating import NoGoFilesError, PackageNotFoundError
from ifacegen.domain.model.package import Package

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from ifacegen.domain.ports.package_importer import PackageImporterPort

logger = logging.getLogger(__name__)

VENDOR_DIR = "vendor"

_NOT_IDENTIFIER = re.compile(r"[^0-9A-Za-z_]")


def resolve_package(importer: PackageImporterPort, import_path: str, src_dir: Path) -> Package:
    """Resolve an import path relative to the importing package's directory.

    Args:
        importer: Direct resolution (GOROOT, module, GOPATH)
        import_path: Import path; "" means src_dir itself
        src_dir: Directory of the importing (destination) package

    Returns:
        Located package. A vendored package keeps the import path as
        requested, not its vendor-prefixed one.

    Raises:
        PackageNotFoundError: If neither direct resolution nor any
            ancestor vendor directory yields a package
    """
    if not import_path:
        return importer.import_dir(src_dir)

    if is_local_import(import_path):
        return importer.import_dir((src_dir / import_path).resolve())

    try:
        return importer.import_path(import_path, src_dir)
    except PackageNotFoundError as direct_error:
        logger.debug("import pkg:%s err:%s, trying vendor directories", import_path, direct_error.reason)
        searched = list(direct_error.searched)

        for ancestor in _ancestors(src_dir):
            candidate = ancestor / VENDOR_DIR / import_path
            searched.append(candidate)
            try:
                package = importer.import_dir(candidate)
            except PackageNotFoundError as e:
                logger.debug("vendor dir:%s err:%s", candidate, e.reason)
                continue

            logger.info("using vendored package %s from %s", import_path, candidate)
            return dataclasses.replace(package, import_path=import_path)

        raise PackageNotFoundError(
            import_path,
            f"{direct_error.reason}; no vendor directory from {src_dir} upward has it",
            tuple(searched),
        ) from direct_error


def destination_package(importer: PackageImporterPort, work_dir: Path) -> Package:
    """Package the generated code will live in.

    A directory without Go files is a package about to be written: it is
    named after the directory instead of failing.

    Raises:
        PackageNotFoundError: If work_dir is not a directory or its Go
            files do not form one package
    """
    try:
        return importer.import_dir(work_dir)
    except NoGoFilesError as e:
        name = package_name_for_dir(work_dir)
        logger.warning("%s; assuming new package %s", e.reason, name)
        return Package(
            dir=work_dir,
            name=name,
            import_path=importer.dir_import_path(work_dir),
        )


def package_name_for_dir(directory: Path) -> str:
    """Package name derived from a directory name (`my-pkg` -> `my_pkg`)."""
    name = _NOT_IDENTIFIER.sub("_", directory.name.lower())
    if not name or name[0].isdigit():
        name = "_" + name
    return name


def is_local_import(import_path: str) -> bool:
    """`.`, `..`, `./x` and `../x` are resolved against the source directory."""
    return import_path in (".", "..") or import_path.startswith(("./", "../"))


def _ancestors(directory: Path) -> Iterator[Path]:
    """directory, its parent, ... up to the filesystem root."""
    directory = directory.resolve()
    yield directory
    yield from directory.parents
