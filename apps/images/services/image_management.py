"""
Image service.

Binary data lives in Cloudinary; Firestore keeps one metadata document per
event image, and the profile photo URL on the user document.
"""

import logging

from apps.accounts.repository import UserRepository
from apps.core.utils import now_iso
from apps.events.repository import EventRepository

from .. import storage
from ..models import EventImage
from ..repository import EventImageRepository
from .exceptions import (
    InvalidImageError,
    ImageNotFoundError,
    ImageEventNotFoundError,
    ImageProfileNotFoundError,
    ImageDeletePermissionError,
)

logger = logging.getLogger(__name__)


def validate_image_file(file) -> None:
    """
    Raises:
        InvalidImageError: If the file is missing, empty or not image/*
    """
    if file is None or not getattr(file, 'size', 0):
        raise InvalidImageError("File is empty")

    content_type = getattr(file, 'content_type', None) or ''
    if not content_type.startswith('image/'):
        raise InvalidImageError("File must be an image")


def upload_event_image(*, file, event_id: str, uid: str) -> EventImage:
    """
    Upload an image for an event and store its metadata.

    Raises:
        InvalidImageError: If the file is not a usable image
        ImageEventNotFoundError: If the event does not exist
        ExternalServiceError: If the Cloudinary upload fails
    """
    validate_image_file(file)

    if not EventRepository().exists(event_id):
        raise ImageEventNotFoundError("Event not found")

    url = storage.upload_image(file, storage.EVENT_IMAGES_FOLDER)

    image = EventImage(
        path=url,
        event_id=event_id,
        uploaded_by=uid,
        original_filename=getattr(file, 'name', None),
        created_at=now_iso(),
    )
    image.id = EventImageRepository().add(image)

    logger.info("Image %s uploaded for event %s by %s", image.id, event_id, uid)
    return image


def upload_profile_photo(*, file, uid: str) -> str:
    """
    Replace the user's profile photo. Returns the new photo URL.

    The previous photo is removed from Cloudinary on a best-effort basis.

    Raises:
        InvalidImageError: If the file is not a usable image
        ImageProfileNotFoundError: If the user has no profile
        ExternalServiceError: If the Cloudinary upload fails
    """
    validate_image_file(file)

    repository = UserRepository()
    user = repository.get(uid)
    if user is None:
        raise ImageProfileNotFoundError("User not found")

    if storage.is_cloudinary_url(user.photo_url):
        public_id = storage.public_id_from_url(user.photo_url, storage.USER_IMAGES_FOLDER)
        if not storage.delete_image(public_id):
            logger.warning("Could not delete old profile photo %s, continuing", public_id)

    photo_url = storage.upload_image(file, storage.USER_IMAGES_FOLDER)
    repository.update(uid, {'photoUrl': photo_url, 'updatedAt': now_iso()})

    logger.info("Profile photo updated for %s", uid)
    return photo_url


def get_event_images(*, event_id: str) -> list[EventImage]:
    images = EventImageRepository().for_event(event_id)
    logger.debug("Found %d images for event %s", len(images), event_id)
    return images


def delete_image(*, document_id: str, uid: str) -> None:
    """
    Delete an event image from Cloudinary and Firestore.

    Only the uploader or the creator of the event may delete.

    Raises:
        ImageNotFoundError: If the metadata document does not exist
        ImageDeletePermissionError: If uid may not delete the image
    """
    repository = EventImageRepository()
    image = repository.get(document_id)
    if image is None:
        raise ImageNotFoundError("Image not found")

    if image.uploaded_by != uid:
        event = EventRepository().get(image.event_id)
        if event is None or not event.is_creator(uid):
            raise ImageDeletePermissionError(
                "Only the uploader or the event creator can delete this image"
            )

    if image.path:
        storage.delete_image(storage.public_id_from_url(image.path, storage.EVENT_IMAGES_FOLDER))

    repository.delete(document_id)
    logger.info("Image %s deleted by %s", document_id, uid)
