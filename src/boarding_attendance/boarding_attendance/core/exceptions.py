class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid (e.g. a malformed date)."""


class StoreError(DomainError):
    """Raised when the attendance database rejects or fails a query."""
