"""Custom exceptions for FloraScan.

Each exception type represents a category of error.
Catch specific exceptions to handle errors appropriately.
"""


class FloraScanError(Exception):
    """Base exception for all FloraScan errors."""

    pass


class NoMatchError(FloraScanError):
    """Raised when an identification result carries no candidate species."""

    def __init__(self, message: str = "No plant match found") -> None:
        super().__init__(message)


class IdentificationError(FloraScanError):
    """Raised when the identification provider cannot be reached or answers garbage."""

    pass


class EnrichmentSourceError(FloraScanError):
    """Raised inside an image source when it cannot produce a result.

    Never escapes the source that raised it.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class PersistenceError(FloraScanError):
    """Raised when a database read or write fails."""

    pass


class SpeciesNotFoundError(FloraScanError):
    """Raised when a species or observation lookup by identifier finds nothing."""

    pass
