from apps.core import collections
from apps.core.repository import FirestoreRepository

from .models import Event, EventUser


class EventRepository(FirestoreRepository):
    collection_name = collections.EVENTS
    model = Event

    def find_by_share_code(self, share_code: str) -> Event | None:
        return self.first(shareCode=share_code)

    def share_code_exists(self, share_code: str) -> bool:
        return self.find_by_share_code(share_code) is not None


class EventUserRepository(FirestoreRepository):
    collection_name = collections.EVENT_USERS
    model = EventUser

    def for_event(self, event_id: str, status: str | None = None) -> list[EventUser]:
        if status:
            return self.filter(eventId=event_id, status=status)
        return self.filter(eventId=event_id)

    def for_user(self, user_id: str, status: str | None = None) -> list[EventUser]:
        if status:
            return self.filter(userId=user_id, status=status)
        return self.filter(userId=user_id)

    def find(self, event_id: str, user_id: str) -> EventUser | None:
        return self.first(eventId=event_id, userId=user_id)
