"""User-supplied interface identifier."""

from __future__ import annotations

from dataclasses import dataclass

from ifacegen.domain.exceptions.identifier import MalformedIdentifierError


@dataclass(frozen=True, slots=True)
class InterfaceIdentifier:
    """`[import_path.]InterfaceName` split into its parts.

    Attributes:
        import_path: Package import path, "" for the current package
        name: Interface name
    """

    import_path: str
    name: str

    @classmethod
    def parse(cls, identifier: str) -> InterfaceIdentifier:
        """Split at the last `.`.

        A `.` followed by a `/` belongs to the import path
        (`github.com/x/y`), so the identifier has no name part and is
        rejected rather than split at an earlier dot.

        Raises:
            MalformedIdentifierError: If no valid path/name split exists
        """
        if not identifier:
            raise MalformedIdentifierError(identifier, "interface name is required")

        i = identifier.rfind(".")
        if i < 0:
            import_path, name = "", identifier
        else:
            if "/" in identifier[i + 1 :]:
                raise MalformedIdentifierError(
                    identifier, "'/' after the last '.', expected [import_path.]Interface"
                )
            import_path, name = identifier[:i], identifier[i + 1 :]
            if not import_path:
                raise MalformedIdentifierError(identifier, "empty import path before '.'")

        if not name.isidentifier():
            raise MalformedIdentifierError(identifier, f"{name!r} is not a valid Go identifier")

        return cls(import_path=import_path, name=name)

    def __str__(self) -> str:
        """Format back to `[import_path.]Name`."""
        if self.import_path:
            return f"{self.import_path}.{self.name}"
        return self.name
