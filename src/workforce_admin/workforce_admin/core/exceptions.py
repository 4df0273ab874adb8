class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record (employee, shift, ...) does not exist."""


class AuthorizationError(DomainError):
    """Raised when the current user lacks permission for an action."""


class StoreError(DomainError):
    """Raised when the data store fails (connection lost, bad query, ...)."""


class ConfigurationError(DomainError):
    """Raised at start-up when required settings are missing."""
