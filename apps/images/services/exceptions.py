"""Domain-specific exceptions for images services."""

from apps.core.exceptions import (
    ApplicationError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


class ImagesServiceError(ApplicationError):
    """Base exception for images services."""
    pass


class InvalidImageError(ImagesServiceError, ValidationError):
    """Raised when the upload is empty or not an image."""
    pass


class ImageNotFoundError(ImagesServiceError, NotFoundError):
    pass


class ImageEventNotFoundError(ImagesServiceError, NotFoundError):
    pass


class ImageProfileNotFoundError(ImagesServiceError, NotFoundError):
    pass


class ImageDeletePermissionError(ImagesServiceError, ForbiddenError):
    """Raised when someone other than the uploader or event creator deletes."""
    pass
