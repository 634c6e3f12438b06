"""Exceptions raised while parsing identifiers and reducing structures."""


class SubstructureError(Exception):
    """Base class for all substructure errors."""


class MalformedIdentifierError(SubstructureError, ValueError):
    """Raised when an identifier does not match the ``code[.ranges]`` form."""


class MalformedRangeError(SubstructureError, ValueError):
    """Raised when a single range token cannot be parsed."""

    def __init__(self, token: str, reason: str = ""):
        self.token = token
        message = f"Malformed residue range '{token}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NullRangesError(SubstructureError, TypeError):
    """Raised when an identifier is built without a ranges collection."""


class StructureError(SubstructureError):
    """Raised when a range cannot be resolved against a loaded structure."""
