"""Domain-specific exceptions for accounts services."""

from apps.core.exceptions import (
    ApplicationError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
)


class AccountsServiceError(ApplicationError):
    """Base exception for accounts services."""
    pass


class UserNotFoundError(AccountsServiceError, NotFoundError):
    """Raised when a profile (or Firebase Auth account) does not exist."""
    pass


class UserAlreadyExistsError(AccountsServiceError, BadRequestError):
    """Raised when a profile already exists for the UID."""
    pass


class UsernameTakenError(AccountsServiceError, BadRequestError):
    """Raised when another profile already uses the username."""
    pass


class EmailTakenError(AccountsServiceError, BadRequestError):
    """Raised when another profile already uses the email."""
    pass


class ProfileOwnershipError(AccountsServiceError, ForbiddenError):
    """Raised when a user tries to edit someone else's profile."""
    pass
