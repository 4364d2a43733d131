class DomainError(Exception):
    """Base exception for the attendance tracker."""


class ValidationError(DomainError):
    """Raised when operator input is invalid or references missing data."""


class StoreError(DomainError):
    """Raised when a remote store operation fails (connection or query rejected)."""
