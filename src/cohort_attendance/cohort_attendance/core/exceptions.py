class DomainError(Exception):
    """Base exception for business rule violations."""


class InvalidInputError(DomainError):
    """Raised when a date or identifier argument is missing or malformed."""


class ConfigurationError(DomainError):
    """Raised when the cohort configuration is inconsistent (overlaps, gaps, bad bounds)."""


class NotFoundError(DomainError):
    """Raised when a lookup that must produce a result finds nothing."""


class AuthorizationError(DomainError):
    """Raised when a transition confirmation is not authorized for the source cohort."""
