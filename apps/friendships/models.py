from dataclasses import dataclass

from django.db import models

from apps.core.models import FirestoreDocument


class FriendshipStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    ACCEPTED = 'ACCEPTED', 'Accepted'
    DECLINED = 'DECLINED', 'Declined'


@dataclass
class Friendship(FirestoreDocument):
    """
    Connection between two users (`friendships` collection).

    user1_id sent the request and user2_id received it. There is at most one
    document per pair of users, whichever direction it was sent in.
    """

    user1_id: str
    user2_id: str
    requested_by: str
    status: str = FriendshipStatus.PENDING
    requested_at: str | None = None
    responded_at: str | None = None
    id: str | None = None

    def involves(self, uid: str) -> bool:
        return uid in (self.user1_id, self.user2_id)
