"""
Event management service.

Handles event CRUD, share codes and the "my events" listing. Every event has
exactly one CREATOR record in `event_users`, created together with the event.
"""

import logging

from google.api_core import exceptions as google_exceptions

from apps.core.models import DocumentDecodeError, to_camel
from apps.core.utils import now_iso

from ..models import (
    Event,
    EventUser,
    EventUserRole,
    EventUserStatus,
    EventWithMetadata,
    generate_share_code,
)
from ..repository import EventRepository, EventUserRepository
from .exceptions import EventNotFoundError, NotEventCreatorError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('title', 'description', 'event_date', 'event_time', 'location', 'free', 'price')


def _get_event_or_404(event_id: str, repository: EventRepository | None = None) -> Event:
    event = (repository or EventRepository()).get(event_id)
    if event is None:
        raise EventNotFoundError("Event not found")
    return event


def _with_metadata(event: Event, event_user: EventUser | None) -> EventWithMetadata:
    return EventWithMetadata(
        id=event.id,
        event=event,
        user_status=event_user.status if event_user else None,
        user_role=event_user.role if event_user else None,
    )


def _generate_unique_share_code(repository: EventRepository, max_retries: int = 5) -> str:
    """
    Generate a share code not used by any event.

    Raises:
        RuntimeError: If no unique code is found within max_retries attempts
    """
    for attempt in range(max_retries):
        code = generate_share_code()
        if not repository.share_code_exists(code):
            return code
        logger.warning("Share code collision on %s (attempt %d)", code, attempt + 1)

    raise RuntimeError(
        f"Failed to generate unique share code after {max_retries} attempts"
    )


def get_events_for_user(*, uid: str, status: str | None = None) -> list[EventWithMetadata]:
    """
    Return every event the user is linked to, with their status and role.

    Events that cannot be loaded are skipped and logged so one broken
    reference does not hide the rest of the list.
    """
    event_repository = EventRepository()
    links = EventUserRepository().for_user(uid, status=status)

    results = []
    for link in links:
        try:
            event = event_repository.get(link.event_id)
        except (google_exceptions.GoogleAPICallError, DocumentDecodeError):
            logger.exception("Failed to load event %s for user %s", link.event_id, uid)
            continue
        if event is None:
            logger.warning("Skipping event-user %s: event %s no longer exists", link.id, link.event_id)
            continue
        results.append(_with_metadata(event, link))

    results.sort(key=lambda item: (item.event.event_date or '', item.event.event_time or ''))
    return results


def get_event(*, event_id: str, uid: str) -> EventWithMetadata:
    """
    Raises:
        EventNotFoundError: If the event does not exist
    """
    event = _get_event_or_404(event_id)
    return _with_metadata(event, EventUserRepository().find(event_id, uid))


def create_event(
    *,
    creator_uid: str,
    title: str,
    event_date: str,
    description: str | None = None,
    event_time: str | None = None,
    location: str | None = None,
    free: bool = True,
    price: float = 0.0,
) -> EventWithMetadata:
    """
    Create an event and the creator's CREATOR record.

    Raises:
        RuntimeError: If a unique share code cannot be generated
    """
    event_repository = EventRepository()
    now = now_iso()

    event = Event(
        title=title,
        event_date=event_date,
        creator_uid=creator_uid,
        description=description,
        event_time=event_time,
        location=location,
        free=free,
        price=float(price),
        share_code=_generate_unique_share_code(event_repository),
        created_at=now,
        updated_at=now,
    )
    event.id = event_repository.add(event)

    creator_link = EventUser(
        event_id=event.id,
        user_id=creator_uid,
        status=EventUserStatus.CREATOR,
        role=EventUserRole.CREATOR,
        invited_at=now,
        responded_at=now,
    )
    creator_link.id = EventUserRepository().add(creator_link)

    logger.info("Event %s created by %s (share code %s)", event.id, creator_uid, event.share_code)
    return _with_metadata(event, creator_link)


def update_event(*, event_id: str, uid: str, **changes) -> EventWithMetadata:
    """
    Update event fields (creator only). Only fields in `changes` are written.

    Raises:
        EventNotFoundError: If the event does not exist
        NotEventCreatorError: If the user is not the creator
    """
    repository = EventRepository()
    event = _get_event_or_404(event_id, repository)

    if not event.is_creator(uid):
        raise NotEventCreatorError("Only the event creator can update the event")

    updates = {}
    for name in UPDATABLE_FIELDS:
        if name in changes:
            value = float(changes[name]) if name == 'price' else changes[name]
            setattr(event, name, value)
            updates[to_camel(name)] = value

    event.updated_at = now_iso()
    updates['updatedAt'] = event.updated_at
    repository.update(event_id, updates)

    logger.info("Event %s updated by %s", event_id, uid)
    return _with_metadata(event, EventUserRepository().find(event_id, uid))


def delete_event(*, event_id: str, uid: str) -> int:
    """
    Delete an event and all of its event-user records (creator only).

    Returns:
        Number of event-user records deleted

    Raises:
        EventNotFoundError: If the event does not exist
        NotEventCreatorError: If the user is not the creator
    """
    event_repository = EventRepository()
    event = _get_event_or_404(event_id, event_repository)

    if not event.is_creator(uid):
        raise NotEventCreatorError("Only the event creator can delete the event")

    event_user_repository = EventUserRepository()
    links = event_user_repository.for_event(event_id)
    deleted = event_user_repository.delete_all(
        [link.id for link in links],
        extra_refs=[event_repository.collection.document(event_id)],
    )

    logger.info("Event %s deleted by %s with %d event-users", event_id, uid, deleted)
    return deleted


def find_event_by_share_code(*, share_code: str, uid: str) -> EventWithMetadata:
    """
    Resolve a share code and link the user to the event.

    A user without a record gets a PENDING attendee invitation; the creator
    and already-linked users are returned as they are.

    Raises:
        EventNotFoundError: If no event has this share code
    """
    code = share_code.strip().upper()
    event = EventRepository().find_by_share_code(code)
    if event is None:
        raise EventNotFoundError(f"No event found for share code {code}")

    event_user_repository = EventUserRepository()
    link = event_user_repository.find(event.id, uid)

    if link is None and not event.is_creator(uid):
        link = EventUser(
            event_id=event.id,
            user_id=uid,
            status=EventUserStatus.PENDING,
            role=EventUserRole.ATTENDEE,
            invited_at=now_iso(),
        )
        link.id = event_user_repository.add(link)
        logger.info("User %s joined event %s via share code", uid, event.id)

    return _with_metadata(event, link)
