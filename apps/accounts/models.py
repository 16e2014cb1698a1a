from dataclasses import dataclass

from apps.core.models import FirestoreDocument


USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 12


@dataclass
class User(FirestoreDocument):
    """
    User profile stored in the `users` collection.

    The document id is the Firebase Auth UID. Credentials live in Firebase
    Auth only; this record holds the public profile.
    """

    id_field = 'uid'

    uid: str
    email: str
    username: str
    first_name: str
    last_name: str | None = None
    phone_number: str | None = None
    photo_url: str | None = None
    is_email_verified: bool = False
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def full_name(self) -> str:
        return ' '.join(part for part in (self.first_name, self.last_name) if part)
