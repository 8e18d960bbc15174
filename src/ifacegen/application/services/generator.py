"""Generator: the whole pipeline for one invocation.

identifier -> destination package -> qualifier -> source package ->
symbol table -> interface -> method specs -> template -> formatter

Single-threaded, all in memory. Any failure raises and nothing is
written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ifacegen.application.rendering import render
from ifacegen.application.services.interface_resolver import InterfaceResolver
from ifacegen.application.services.loader import PackageLoader
from ifacegen.application.services.locator import destination_package
from ifacegen.application.services.qualifier import destination_identity, new_qualifier
from ifacegen.application.services.signature_resolver import resolve_methods
from ifacegen.domain.model.enums import GenerationMode
from ifacegen.domain.model.identifier import InterfaceIdentifier
from ifacegen.domain.model.interface_spec import InterfaceSpec

if TYPE_CHECKING:
    from ifacegen.domain.model.configuration import GeneratorConfig
    from ifacegen.domain.model.interface_spec import MethodSpec
    from ifacegen.domain.ports.package_importer import PackageImporterPort
    from ifacegen.domain.ports.source_formatter import SourceFormatterPort
    from ifacegen.domain.ports.symbol_index import SymbolIndexPort

logger = logging.getLogger(__name__)

RECEIVER_SUFFIXES = {
    GenerationMode.STUB: "Gen",
    GenerationMode.MOCK: "Mock",
}


class Generator:
    """Generates stub or mock source for an interface.

    Ports are injected; the generator itself holds no state between
    generate() calls.
    """

    def __init__(
        self,
        importer: PackageImporterPort,
        index: SymbolIndexPort,
        formatter: SourceFormatterPort,
        work_dir: Path | None = None,
    ) -> None:
        """Initialize generator.

        Args:
            importer: Resolves import paths and directories to packages
            index: Builds symbol tables
            formatter: Normalizes rendered source
            work_dir: Destination package directory. None = current directory.
        """
        self._importer = importer
        self._index = index
        self._formatter = formatter
        self._work_dir = work_dir if work_dir is not None else Path.cwd()

    def generate(self, config: GeneratorConfig) -> str:
        """Run the pipeline.

        Returns:
            Formatted source text

        Raises:
            IfaceGenError: Any failure along the way
        """
        identifier = InterfaceIdentifier.parse(config.interface)

        destination = destination_package(self._importer, self._work_dir)
        logger.debug(
            "this pkg: name:%s,dir:%s,path:%s",
            destination.name,
            destination.dir,
            destination.import_path,
        )
        identity = destination_identity(destination, in_test=config.mock_in_test)
        qualifier = new_qualifier(identity)

        loader = PackageLoader(self._importer, self._index, self._work_dir)
        if identifier.import_path:
            source = loader.locate(identifier.import_path)
        else:
            source = destination
        table = loader.load(source)

        shape = InterfaceResolver(loader).find(table, identifier.name)
        methods = resolve_methods(shape, qualifier)

        spec = build_interface_spec(
            interface_name=identifier.name,
            mode=config.mode,
            receiver=config.receiver,
            package_name=identity.display_name,
            methods=methods,
        )
        code = render(spec)
        logger.info("generated %s for %s (%d methods)", spec.receiver, shape, len(methods))

        return self._formatter.format(code, organize_imports=spec.mode is GenerationMode.MOCK)


def build_interface_spec(
    *,
    interface_name: str,
    mode: GenerationMode,
    receiver: str,
    package_name: str,
    methods: tuple[MethodSpec, ...],
) -> InterfaceSpec:
    """Assemble template data.

    Args:
        interface_name: Interface being implemented
        mode: Stub or mock
        receiver: Receiver override, "" = `*{Interface}{Gen|Mock}`
        package_name: Destination package clause (used in mock mode only)
        methods: Resolved methods in declaration order
    """
    if not receiver:
        receiver = f"*{interface_name}{RECEIVER_SUFFIXES[mode]}"

    return InterfaceSpec(
        interface_name=interface_name,
        receiver=receiver,
        package_name=package_name if mode is GenerationMode.MOCK else "",
        methods=methods,
    )
