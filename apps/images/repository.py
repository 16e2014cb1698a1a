from apps.core import collections
from apps.core.repository import FirestoreRepository

from .models import EventImage


class EventImageRepository(FirestoreRepository):
    collection_name = collections.EVENT_IMAGES
    model = EventImage

    def for_event(self, event_id: str) -> list[EventImage]:
        return self.filter(eventId=event_id)
