"""
Invitation management service.

Handles inviting users to events and their responses. Status transitions:

    PENDING  -> ACCEPTED | DECLINED
    ACCEPTED -> DECLINED
    DECLINED -> ACCEPTED
    CREATOR  never changes
"""

import logging

from apps.core.utils import now_iso

from ..models import EventUser, EventUserRole, EventUserStatus, EventWithMetadata
from ..repository import EventRepository, EventUserRepository
from .event_management import get_events_for_user
from .exceptions import (
    EventNotFoundError,
    NotEventCreatorError,
    InvitationNotFoundError,
    InvitationOwnershipError,
    CreatorStatusChangeError,
    InvalidStatusError,
)

logger = logging.getLogger(__name__)


def parse_status(value: str | None) -> str | None:
    """
    Normalise an optional status filter such as 'accepted'.

    Raises:
        InvalidStatusError: If the value is not a known status
    """
    if value is None or not value.strip():
        return None
    normalized = value.strip().upper()
    if normalized not in EventUserStatus.values:
        raise InvalidStatusError(
            f"Invalid status '{value}'. Must be one of: {', '.join(EventUserStatus.values)}"
        )
    return normalized


def invite_users(*, event_id: str, user_ids: list[str], inviter_uid: str) -> list[EventUser]:
    """
    Invite users to an event (creator only).

    Users already linked to the event are skipped, as are repeated ids.

    Returns:
        The newly created PENDING records

    Raises:
        EventNotFoundError: If the event does not exist
        NotEventCreatorError: If the inviter is not the creator
    """
    event = EventRepository().get(event_id)
    if event is None:
        raise EventNotFoundError("Event not found")

    if not event.is_creator(inviter_uid):
        raise NotEventCreatorError("Only the event creator can invite users")

    repository = EventUserRepository()
    already_linked = {link.user_id for link in repository.for_event(event_id)}

    invited = []
    for user_id in dict.fromkeys(user_ids):
        if user_id in already_linked:
            logger.debug("User %s already linked to event %s, skipping", user_id, event_id)
            continue

        link = EventUser(
            event_id=event_id,
            user_id=user_id,
            status=EventUserStatus.PENDING,
            role=EventUserRole.ATTENDEE,
            invited_at=now_iso(),
        )
        link.id = repository.add(link)
        invited.append(link)

    logger.info("Invited %d users to event %s", len(invited), event_id)
    return invited


def _respond(event_user_id: str, uid: str, new_status: str) -> str:
    repository = EventUserRepository()
    link = repository.get(event_user_id)
    if link is None:
        raise InvitationNotFoundError("Invitation not found")

    if link.user_id != uid:
        raise InvitationOwnershipError("You can only respond to your own invitations")

    if link.status == EventUserStatus.CREATOR or link.role == EventUserRole.CREATOR:
        raise CreatorStatusChangeError("The event creator cannot respond to their own event")

    responded_at = now_iso()
    repository.update(event_user_id, {'status': new_status, 'respondedAt': responded_at})

    logger.info("User %s set invitation %s to %s", uid, event_user_id, new_status)
    return link.event_id


def accept_invitation(*, event_user_id: str, uid: str) -> str:
    """
    Accept an invitation. Returns the event id.

    Raises:
        InvitationNotFoundError: If the record does not exist
        InvitationOwnershipError: If the record belongs to someone else
        CreatorStatusChangeError: If the record is the creator's
    """
    return _respond(event_user_id, uid, EventUserStatus.ACCEPTED.value)


def decline_invitation(*, event_user_id: str, uid: str) -> str:
    """Decline an invitation. Returns the event id; raises like accept_invitation."""
    return _respond(event_user_id, uid, EventUserStatus.DECLINED.value)


def get_event_attendees(*, event_id: str, status: str | None = None) -> list[EventUser]:
    """
    Raises:
        EventNotFoundError: If the event does not exist
        InvalidStatusError: If the status filter is unknown
    """
    status = parse_status(status)
    if not EventRepository().exists(event_id):
        raise EventNotFoundError("Event not found")
    return EventUserRepository().for_event(event_id, status=status)


def get_my_events(*, uid: str, status: str | None = None) -> list[EventWithMetadata]:
    """
    Raises:
        InvalidStatusError: If the status filter is unknown
    """
    return get_events_for_user(uid=uid, status=parse_status(status))
