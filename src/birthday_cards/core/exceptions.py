class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class DuplicateEmailError(ValidationError):
    """Raised when an employee with the same email already exists."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class AuthorizationError(DomainError):
    """Raised when the birthday trigger is called with a wrong secret."""


class StorageError(DomainError):
    """Raised when a collection file or asset cannot be written."""


class MailDispatchError(DomainError):
    """Raised when a single birthday email cannot be delivered."""
