"""Interface identifier exceptions."""

from ifacegen.domain.exceptions.base import IfaceGenError


class MalformedIdentifierError(IfaceGenError, ValueError):
    """Interface identifier cannot be split into import path and name.

    Inherits ValueError for semantic correctness (bad user input).

    Attributes:
        identifier: Identifier as given by the user
        reason: Why it was rejected
    """

    def __init__(self, identifier: str, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Malformed interface identifier {identifier!r}: {reason}")
