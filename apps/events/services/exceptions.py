"""
Domain-specific exceptions for events app.

These exceptions represent business rule violations; the API exception
handler converts them to HTTP responses by category.
"""

from apps.core.exceptions import (
    ApplicationError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


class EventsServiceError(ApplicationError):
    """Base exception for all events service errors."""
    pass


class EventNotFoundError(EventsServiceError, NotFoundError):
    """Raised when an event does not exist or a share code matches nothing."""
    pass


class NotEventCreatorError(EventsServiceError, ForbiddenError):
    """Raised when a non-creator tries to edit, delete or invite to an event."""
    pass


class InvitationNotFoundError(EventsServiceError, NotFoundError):
    """Raised when an event-user record does not exist."""
    pass


class InvitationOwnershipError(EventsServiceError, ForbiddenError):
    """Raised when a user responds to someone else's invitation."""
    pass


class CreatorStatusChangeError(EventsServiceError, BadRequestError):
    """Raised when the creator's own record would be accepted or declined."""
    pass


class InvalidStatusError(EventsServiceError, ValidationError):
    """Raised when a status filter is not a known status."""
    pass
