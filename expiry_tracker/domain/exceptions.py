"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidThresholdError(DomainError, ValueError):
    """Raised when a freshness threshold is invalid."""
