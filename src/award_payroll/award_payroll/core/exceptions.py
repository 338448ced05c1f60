class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request input is invalid (dates, organization, format)."""


class DataSourceError(DomainError):
    """Raised when employees or shifts could not be loaded."""
