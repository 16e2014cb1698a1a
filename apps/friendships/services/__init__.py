"""Services for friendships business logic."""

from .exceptions import (
    FriendshipsServiceError,
    FriendshipNotFoundError,
    FriendNotFoundError,
    SelfFriendRequestError,
    FriendshipExistsError,
    FriendshipNotPendingError,
    NotRecipientError,
    NotParticipantError,
)
from .friendship_management import (
    send_friend_request,
    accept_friend_request,
    decline_friend_request,
    remove_friend,
    get_pending_requests,
    get_sent_requests,
    get_friends,
)

__all__ = [
    # Exceptions
    'FriendshipsServiceError',
    'FriendshipNotFoundError',
    'FriendNotFoundError',
    'SelfFriendRequestError',
    'FriendshipExistsError',
    'FriendshipNotPendingError',
    'NotRecipientError',
    'NotParticipantError',
    # Services
    'send_friend_request',
    'accept_friend_request',
    'decline_friend_request',
    'remove_friend',
    'get_pending_requests',
    'get_sent_requests',
    'get_friends',
]
