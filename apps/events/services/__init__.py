"""
Events app services layer.

Services contain business logic and orchestrate reads and writes across the
`events` and `event_users` collections.
"""

from .exceptions import (
    EventsServiceError,
    EventNotFoundError,
    NotEventCreatorError,
    InvitationNotFoundError,
    InvitationOwnershipError,
    CreatorStatusChangeError,
    InvalidStatusError,
)

from .event_management import (
    get_events_for_user,
    get_event,
    create_event,
    update_event,
    delete_event,
    find_event_by_share_code,
)

from .invitation_management import (
    parse_status,
    invite_users,
    accept_invitation,
    decline_invitation,
    get_event_attendees,
    get_my_events,
)


__all__ = [
    # Exceptions
    'EventsServiceError',
    'EventNotFoundError',
    'NotEventCreatorError',
    'InvitationNotFoundError',
    'InvitationOwnershipError',
    'CreatorStatusChangeError',
    'InvalidStatusError',

    # Event Management
    'get_events_for_user',
    'get_event',
    'create_event',
    'update_event',
    'delete_event',
    'find_event_by_share_code',

    # Invitation Management
    'parse_status',
    'invite_users',
    'accept_invitation',
    'decline_invitation',
    'get_event_attendees',
    'get_my_events',
]
