from apps.core import collections
from apps.core.repository import FirestoreRepository

from .models import Friendship


class FriendshipRepository(FirestoreRepository):
    collection_name = collections.FRIENDSHIPS
    model = Friendship

    def find_between(self, uid_a: str, uid_b: str) -> Friendship | None:
        """Friendship between two users in either direction."""
        return (
            self.first(user1Id=uid_a, user2Id=uid_b)
            or self.first(user1Id=uid_b, user2Id=uid_a)
        )

    def received(self, uid: str, status: str) -> list[Friendship]:
        return self.filter(user2Id=uid, status=status)

    def sent(self, uid: str, status: str) -> list[Friendship]:
        return self.filter(user1Id=uid, status=status)
