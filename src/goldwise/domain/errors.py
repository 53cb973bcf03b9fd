# src/goldwise/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations and upstream failures.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class UpstreamError(DomainError):
    """Raised when a provider returns a non-OK status or an unusable payload."""

    def __init__(self, message: str, provider: str = "", status_code: int | None = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class ValidationError(DomainError):
    """Raised when user input (e.g. a premium percentage) is out of domain."""
    pass


class ParseError(DomainError):
    """Raised when a single feed item cannot be parsed."""
    pass


class PersistenceReadError(DomainError):
    """Raised when locally stored state cannot be decoded."""
    pass
