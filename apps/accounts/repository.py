from apps.core import collections
from apps.core.repository import FirestoreRepository

from .models import User


class UserRepository(FirestoreRepository):
    collection_name = collections.USERS
    model = User

    def find_by_username(self, username: str) -> User | None:
        return self.first(username=username)

    def find_by_email(self, email: str) -> User | None:
        return self.first(email=email)
