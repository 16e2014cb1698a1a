# ==========================================
# apps/events/models.py
# ==========================================

import secrets
import string
from dataclasses import dataclass

from django.db import models

from apps.core.models import FirestoreDocument


SHARE_CODE_PREFIX = 'IH-'
SHARE_CODE_LENGTH = 5
SHARE_CODE_ALPHABET = string.ascii_uppercase + string.digits


class EventUserStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    ACCEPTED = 'ACCEPTED', 'Accepted'
    DECLINED = 'DECLINED', 'Declined'
    CREATOR = 'CREATOR', 'Creator'


class EventUserRole(models.TextChoices):
    CREATOR = 'CREATOR', 'Creator'
    ATTENDEE = 'ATTENDEE', 'Attendee'


def generate_share_code() -> str:
    """Random code like IH-7KQ2M."""
    suffix = ''.join(secrets.choice(SHARE_CODE_ALPHABET) for _ in range(SHARE_CODE_LENGTH))
    return f'{SHARE_CODE_PREFIX}{suffix}'


@dataclass
class Event(FirestoreDocument):
    """Event stored in the `events` collection."""

    title: str
    event_date: str
    creator_uid: str
    description: str | None = None
    event_time: str | None = None
    location: str | None = None
    free: bool = True
    price: float = 0.0
    share_code: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    id: str | None = None

    def is_creator(self, uid: str) -> bool:
        return self.creator_uid == uid


@dataclass
class EventUser(FirestoreDocument):
    """A user's invitation status and role for one event (`event_users`)."""

    event_id: str
    user_id: str
    status: str = EventUserStatus.PENDING
    role: str = EventUserRole.ATTENDEE
    invited_at: str | None = None
    responded_at: str | None = None
    id: str | None = None


@dataclass
class EventWithMetadata:
    """An event together with the requesting user's status and role."""

    id: str
    event: Event
    user_status: str | None = None
    user_role: str | None = None
