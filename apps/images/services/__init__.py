"""Services for images business logic."""

from .exceptions import (
    ImagesServiceError,
    InvalidImageError,
    ImageNotFoundError,
    ImageEventNotFoundError,
    ImageProfileNotFoundError,
    ImageDeletePermissionError,
)
from .image_management import (
    validate_image_file,
    upload_event_image,
    upload_profile_photo,
    get_event_images,
    delete_image,
)

__all__ = [
    # Exceptions
    'ImagesServiceError',
    'InvalidImageError',
    'ImageNotFoundError',
    'ImageEventNotFoundError',
    'ImageProfileNotFoundError',
    'ImageDeletePermissionError',
    # Services
    'validate_image_file',
    'upload_event_image',
    'upload_profile_photo',
    'get_event_images',
    'delete_image',
]
