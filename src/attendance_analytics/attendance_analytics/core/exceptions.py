class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class TimeParseError(ValidationError):
    """Raised when a clock-time string cannot be parsed."""


class StoreError(DomainError):
    """Raised when the record store cannot be read or written."""
