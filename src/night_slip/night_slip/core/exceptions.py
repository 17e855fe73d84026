class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when a credential is missing or cannot be verified."""


class AccessDenied(DomainError):
    """Raised when an actor lacks permission for an action."""


class Locked(DomainError):
    """Raised when a member has already used their single self-edit."""


class NotFound(DomainError):
    """Raised when a referenced member, date or record does not exist."""


class UpstreamFailure(DomainError):
    """Raised when the store or the spreadsheet mirror call fails."""
