import pytest

from apps.friendships.models import FriendshipStatus
from apps.friendships.services import (
    send_friend_request,
    accept_friend_request,
    decline_friend_request,
    remove_friend,
    get_pending_requests,
    get_sent_requests,
    get_friends,
    SelfFriendRequestError,
    FriendNotFoundError,
    FriendshipExistsError,
    FriendshipNotPendingError,
    NotRecipientError,
    NotParticipantError,
)


class TestSendFriendRequest:

    def test_creates_pending(self, pending_request, alice, bob):
        assert pending_request.status == FriendshipStatus.PENDING
        assert pending_request.user1_id == alice.uid
        assert pending_request.user2_id == bob.uid
        assert pending_request.requested_by == alice.uid

    def test_to_self(self, alice):
        with pytest.raises(SelfFriendRequestError):
            send_friend_request(from_uid=alice.uid, to_uid=alice.uid)

    def test_to_unknown_user(self, alice):
        with pytest.raises(FriendNotFoundError):
            send_friend_request(from_uid=alice.uid, to_uid='ghost')

    def test_duplicate_in_either_direction(self, pending_request, alice, bob):
        with pytest.raises(FriendshipExistsError):
            send_friend_request(from_uid=alice.uid, to_uid=bob.uid)
        with pytest.raises(FriendshipExistsError):
            send_friend_request(from_uid=bob.uid, to_uid=alice.uid)

    def test_declined_request_is_reopened(self, pending_request, alice, bob, firestore):
        decline_friend_request(friendship_id=pending_request.id, uid=bob.uid)

        reopened = send_friend_request(from_uid=bob.uid, to_uid=alice.uid)

        assert reopened.id == pending_request.id
        assert reopened.status == FriendshipStatus.PENDING
        assert reopened.user1_id == bob.uid
        assert reopened.responded_at is None
        assert len(firestore.docs('friendships')) == 1


class TestAnswerFriendRequest:

    def test_accept(self, pending_request, alice, bob):
        friendship = accept_friend_request(friendship_id=pending_request.id, uid=bob.uid)

        assert friendship.status == FriendshipStatus.ACCEPTED
        assert friendship.responded_at is not None
        assert [f.id for f in get_friends(uid=alice.uid)] == [pending_request.id]
        assert [f.id for f in get_friends(uid=bob.uid)] == [pending_request.id]

    def test_sender_cannot_accept(self, pending_request, alice):
        with pytest.raises(NotRecipientError):
            accept_friend_request(friendship_id=pending_request.id, uid=alice.uid)

    def test_answer_twice(self, pending_request, bob):
        accept_friend_request(friendship_id=pending_request.id, uid=bob.uid)

        with pytest.raises(FriendshipNotPendingError):
            decline_friend_request(friendship_id=pending_request.id, uid=bob.uid)


class TestRemoveFriend:

    def test_either_participant(self, pending_request, bob):
        remove_friend(friendship_id=pending_request.id, uid=bob.uid)
        assert get_pending_requests(uid=bob.uid) == []

    def test_outsider(self, pending_request, carol):
        with pytest.raises(NotParticipantError):
            remove_friend(friendship_id=pending_request.id, uid=carol.uid)


class TestListings:

    def test_pending_and_sent(self, pending_request, alice, bob):
        assert [f.id for f in get_pending_requests(uid=bob.uid)] == [pending_request.id]
        assert get_pending_requests(uid=alice.uid) == []
        assert [f.id for f in get_sent_requests(uid=alice.uid)] == [pending_request.id]
        assert get_sent_requests(uid=bob.uid) == []
        assert get_friends(uid=alice.uid) == []
