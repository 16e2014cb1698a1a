"""
Friendship service.

    PENDING -> ACCEPTED | DECLINED   (recipient only)
    DECLINED -> PENDING              (a new request from either user)
    any -> removed                   (either participant)
"""

import logging

from apps.accounts.repository import UserRepository
from apps.core.utils import now_iso

from ..models import Friendship, FriendshipStatus
from ..repository import FriendshipRepository
from .exceptions import (
    FriendshipNotFoundError,
    FriendNotFoundError,
    SelfFriendRequestError,
    FriendshipExistsError,
    FriendshipNotPendingError,
    NotRecipientError,
    NotParticipantError,
)

logger = logging.getLogger(__name__)


def _get_friendship_or_404(repository: FriendshipRepository, friendship_id: str) -> Friendship:
    friendship = repository.get(friendship_id)
    if friendship is None:
        raise FriendshipNotFoundError("Friendship not found")
    return friendship


def send_friend_request(*, from_uid: str, to_uid: str) -> Friendship:
    """
    Send a friend request.

    A previously declined friendship is reopened as a new request from the
    sender instead of creating a second document for the pair.

    Raises:
        SelfFriendRequestError: If from_uid == to_uid
        FriendNotFoundError: If the recipient has no profile
        FriendshipExistsError: If a pending or accepted friendship exists
    """
    if from_uid == to_uid:
        raise SelfFriendRequestError("Cannot send friend request to yourself")

    if not UserRepository().exists(to_uid):
        raise FriendNotFoundError(f"User with UID {to_uid} not found")

    repository = FriendshipRepository()
    existing = repository.find_between(from_uid, to_uid)

    if existing is not None and existing.status != FriendshipStatus.DECLINED:
        raise FriendshipExistsError("Friendship request already exists")

    friendship = Friendship(
        user1_id=from_uid,
        user2_id=to_uid,
        requested_by=from_uid,
        status=FriendshipStatus.PENDING,
        requested_at=now_iso(),
        responded_at=None,
    )

    if existing is None:
        friendship.id = repository.add(friendship)
        logger.info("Friend request %s sent from %s to %s", friendship.id, from_uid, to_uid)
    else:
        friendship.id = existing.id
        repository.set(existing.id, friendship)
        logger.info("Declined friendship %s reopened by %s", existing.id, from_uid)

    return friendship


def _answer(friendship_id: str, uid: str, new_status: str, verb: str) -> Friendship:
    repository = FriendshipRepository()
    friendship = _get_friendship_or_404(repository, friendship_id)

    if friendship.user2_id != uid:
        raise NotRecipientError(f"You can only {verb} requests sent to you")

    if friendship.status != FriendshipStatus.PENDING:
        raise FriendshipNotPendingError("Friendship is not pending")

    friendship.status = new_status
    friendship.responded_at = now_iso()
    repository.update(friendship_id, {
        'status': new_status,
        'respondedAt': friendship.responded_at,
    })

    logger.info("Friendship %s %s by %s", friendship_id, new_status.lower(), uid)
    return friendship


def accept_friend_request(*, friendship_id: str, uid: str) -> Friendship:
    """
    Raises:
        FriendshipNotFoundError: If the friendship does not exist
        NotRecipientError: If uid did not receive the request
        FriendshipNotPendingError: If the request was already answered
    """
    return _answer(friendship_id, uid, FriendshipStatus.ACCEPTED.value, 'accept')


def decline_friend_request(*, friendship_id: str, uid: str) -> Friendship:
    """Raises like accept_friend_request."""
    return _answer(friendship_id, uid, FriendshipStatus.DECLINED.value, 'decline')


def remove_friend(*, friendship_id: str, uid: str) -> None:
    """
    Delete a friendship or request in any state.

    Raises:
        FriendshipNotFoundError: If the friendship does not exist
        NotParticipantError: If uid is not one of the two users
    """
    repository = FriendshipRepository()
    friendship = _get_friendship_or_404(repository, friendship_id)

    if not friendship.involves(uid):
        raise NotParticipantError("You can only remove your own friendships")

    repository.delete(friendship_id)
    logger.info("Friendship %s removed by %s", friendship_id, uid)


def get_pending_requests(*, uid: str) -> list[Friendship]:
    """Requests waiting for uid to answer."""
    return FriendshipRepository().received(uid, FriendshipStatus.PENDING.value)


def get_sent_requests(*, uid: str) -> list[Friendship]:
    """Requests uid sent that are still unanswered."""
    return FriendshipRepository().sent(uid, FriendshipStatus.PENDING.value)


def get_friends(*, uid: str) -> list[Friendship]:
    repository = FriendshipRepository()
    accepted = FriendshipStatus.ACCEPTED.value
    return repository.sent(uid, accepted) + repository.received(uid, accepted)
