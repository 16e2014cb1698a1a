import pytest

from apps.events.models import EventUser, EventUserStatus, EventUserRole
from apps.events.repository import EventUserRepository
from apps.events.services import create_event


CREATOR_UID = 'creator-uid'
GUEST_UID = 'guest-uid'
OTHER_UID = 'other-uid'


@pytest.fixture
def creator_client(client_for):
    """Return API client authenticated as the event creator."""
    return client_for(CREATOR_UID)


@pytest.fixture
def guest_client(client_for):
    """Return API client authenticated as an invited guest."""
    return client_for(GUEST_UID)


@pytest.fixture
def other_client(client_for):
    """Return API client authenticated as a user unrelated to the event."""
    return client_for(OTHER_UID)


@pytest.fixture
def event():
    """Create and return a test event with its creator record."""
    return create_event(
        creator_uid=CREATOR_UID,
        title='Summer Party',
        event_date='2025-07-01',
        event_time='18:00',
        location='Oslo',
        description='Bring snacks',
        free=False,
        price=150.0,
    ).event


@pytest.fixture
def invitation(event):
    """Pending invitation for the guest."""
    link = EventUser(
        event_id=event.id,
        user_id=GUEST_UID,
        status=EventUserStatus.PENDING,
        role=EventUserRole.ATTENDEE,
        invited_at='2025-01-01T12:00:00+00:00',
    )
    link.id = EventUserRepository().add(link)
    return link


@pytest.fixture
def creator_link(event):
    return EventUserRepository().find(event.id, CREATOR_UID)
