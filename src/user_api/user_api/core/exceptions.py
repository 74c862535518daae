class DomainError(Exception):
    """Base exception for every error raised by the user API."""


class MalformedRequest(DomainError):
    """Raised when a path parameter or JSON body does not have the expected shape."""


class StoreError(DomainError):
    """Raised when the persistence layer fails.

    Driver errors are chained as ``__cause__`` so the original error can be rendered.
    """


class RowNotFound(StoreError):
    """Raised when a statement expected exactly one row and got none."""

    def __init__(self, message: str = "no rows returned by a query that expected to return at least one row"):
        super().__init__(message)


class ConfigError(DomainError):
    """Raised when required configuration is missing at startup."""
