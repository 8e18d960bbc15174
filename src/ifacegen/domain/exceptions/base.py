"""Base exceptions for ifacegen domain."""


class IfaceGenError(Exception):
    """Root exception for all ifacegen errors.

    All domain exceptions inherit from this.
    The CLI catches it once and turns it into a non-zero exit.
    """
