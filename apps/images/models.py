from dataclasses import dataclass

from apps.core.models import FirestoreDocument


@dataclass
class EventImage(FirestoreDocument):
    """Metadata for an image stored in Cloudinary (`event_images`)."""

    path: str
    event_id: str
    uploaded_by: str | None = None
    original_filename: str | None = None
    created_at: str | None = None
    id: str | None = None
