"""Domain-specific exceptions for friendships services."""

from apps.core.exceptions import (
    ApplicationError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
)


class FriendshipsServiceError(ApplicationError):
    """Base exception for friendships services."""
    pass


class FriendshipNotFoundError(FriendshipsServiceError, NotFoundError):
    pass


class FriendNotFoundError(FriendshipsServiceError, NotFoundError):
    """Raised when the requested friend has no profile."""
    pass


class SelfFriendRequestError(FriendshipsServiceError, BadRequestError):
    pass


class FriendshipExistsError(FriendshipsServiceError, BadRequestError):
    """Raised when a pending or accepted friendship already links the pair."""
    pass


class FriendshipNotPendingError(FriendshipsServiceError, BadRequestError):
    pass


class NotRecipientError(FriendshipsServiceError, ForbiddenError):
    """Raised when someone other than the recipient answers a request."""
    pass


class NotParticipantError(FriendshipsServiceError, ForbiddenError):
    pass
