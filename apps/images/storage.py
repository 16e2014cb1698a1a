"""
Cloudinary adapter.

All Cloudinary calls go through this module. The SDK is configured lazily
from settings on first use.
"""

import logging
from urllib.parse import urlparse

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from django.conf import settings

from apps.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

CLOUDINARY_HOST = 'res.cloudinary.com'
EVENT_IMAGES_FOLDER = 'event_images'
USER_IMAGES_FOLDER = 'user_images'

# Resize only when larger than 1920x1080, let Cloudinary pick quality and format
UPLOAD_OPTIONS = {
    'resource_type': 'image',
    'width': 1920,
    'height': 1080,
    'crop': 'limit',
    'quality': 'auto:good',
    'fetch_format': 'auto',
}

_configured = False


def _configure() -> None:
    global _configured
    if _configured:
        return
    cloudinary.config(
        cloud_name=settings.CLOUDINARY_CLOUD_NAME,
        api_key=settings.CLOUDINARY_API_KEY,
        api_secret=settings.CLOUDINARY_API_SECRET,
        secure=True,
    )
    _configured = True


def upload_image(file, folder: str) -> str:
    """
    Upload a file object to a Cloudinary folder.

    Returns:
        The secure URL of the stored image

    Raises:
        ExternalServiceError: If Cloudinary rejects the upload
    """
    _configure()
    filename = getattr(file, 'name', None)
    logger.info("Uploading %s to Cloudinary folder %s", filename, folder)

    try:
        result = cloudinary.uploader.upload(file, folder=folder, **UPLOAD_OPTIONS)
    except CloudinaryError as e:
        logger.error("Cloudinary upload of %s failed: %s", filename, e)
        raise ExternalServiceError(f"Failed to upload image: {e}")

    url = result['secure_url']
    logger.info("Image uploaded to %s", url)
    return url


def delete_image(public_id: str) -> bool:
    """
    Delete an image by public id. Failures are logged, not raised.

    Returns:
        True if Cloudinary reports the image as deleted
    """
    _configure()
    try:
        result = cloudinary.uploader.destroy(public_id)
    except CloudinaryError as e:
        logger.warning("Cloudinary deletion of %s failed: %s", public_id, e)
        return False

    outcome = result.get('result')
    logger.info("Cloudinary deletion of %s: %s", public_id, outcome)
    return outcome == 'ok'


def public_id_from_url(url: str, folder: str) -> str:
    """
    https://res.cloudinary.com/demo/image/upload/v1/event_images/abc.jpg
    -> event_images/abc
    """
    name = urlparse(url).path.rsplit('/', 1)[-1]
    stem = name.rsplit('.', 1)[0] if '.' in name else name
    return f'{folder}/{stem}'


def is_cloudinary_url(url: str | None) -> bool:
    return bool(url) and urlparse(url).hostname == CLOUDINARY_HOST
