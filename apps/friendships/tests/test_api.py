from django.urls import reverse
from rest_framework import status


class TestSendRequest:
    """Tests for POST /api/friendships/request"""

    def test_send(self, alice_client, alice, bob):
        response = alice_client.post(reverse('friendships:request'), {'toUserId': bob.uid})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user1Id'] == alice.uid
        assert response.data['user2Id'] == bob.uid
        assert response.data['status'] == 'PENDING'
        assert response.data['requestedBy'] == alice.uid
        assert response.data['respondedAt'] is None

    def test_send_to_self(self, alice_client, alice):
        response = alice_client.post(reverse('friendships:request'), {'toUserId': alice.uid})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {
            'error': 'BAD_REQUEST',
            'message': 'Cannot send friend request to yourself',
        }

    def test_send_duplicate(self, bob_client, pending_request, alice):
        response = bob_client.post(reverse('friendships:request'), {'toUserId': alice.uid})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Friendship request already exists'

    def test_send_to_unknown_user(self, alice_client):
        response = alice_client.post(reverse('friendships:request'), {'toUserId': 'ghost'})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_send_missing_body(self, alice_client):
        response = alice_client.post(reverse('friendships:request'), {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'VALIDATION_ERROR'

    def test_send_unauthenticated(self, api_client, bob):
        response = api_client.post(reverse('friendships:request'), {'toUserId': bob.uid})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestAnswerRequest:
    """Tests for POST /api/friendships/{id}/accept and /decline"""

    def test_accept(self, bob_client, pending_request):
        url = reverse('friendships:accept', kwargs={'friendship_id': pending_request.id})
        response = bob_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'ACCEPTED'
        assert response.data['respondedAt'] is not None

    def test_decline(self, bob_client, pending_request):
        url = reverse('friendships:decline', kwargs={'friendship_id': pending_request.id})
        response = bob_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'DECLINED'

    def test_sender_cannot_accept(self, alice_client, pending_request):
        url = reverse('friendships:accept', kwargs={'friendship_id': pending_request.id})
        response = alice_client.post(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['message'] == 'You can only accept requests sent to you'

    def test_accept_missing(self, bob_client):
        url = reverse('friendships:accept', kwargs={'friendship_id': 'missing'})
        response = bob_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_accept_answered_request(self, bob_client, pending_request):
        url = reverse('friendships:accept', kwargs={'friendship_id': pending_request.id})
        bob_client.post(url)
        response = bob_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Friendship is not pending'


class TestRemove:
    """Tests for DELETE /api/friendships/{id}"""

    def test_remove(self, alice_client, pending_request, firestore):
        url = reverse('friendships:remove', kwargs={'friendship_id': pending_request.id})
        response = alice_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'message': 'Friendship removed successfully'}
        assert firestore.docs('friendships') == {}

    def test_remove_by_outsider(self, carol_client, pending_request):
        url = reverse('friendships:remove', kwargs={'friendship_id': pending_request.id})
        response = carol_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['message'] == 'You can only remove your own friendships'


class TestListings:
    """Tests for GET /api/friendships/pending, /sent and /friends"""

    def test_pending(self, bob_client, pending_request):
        response = bob_client.get(reverse('friendships:pending'))

        assert response.status_code == status.HTTP_200_OK
        assert [f['id'] for f in response.data] == [pending_request.id]

    def test_sent(self, alice_client, pending_request):
        response = alice_client.get(reverse('friendships:sent'))

        assert [f['id'] for f in response.data] == [pending_request.id]

    def test_friends(self, alice_client, bob_client, pending_request):
        bob_client.post(reverse('friendships:accept', kwargs={'friendship_id': pending_request.id}))

        response = alice_client.get(reverse('friendships:friends'))

        assert response.status_code == status.HTTP_200_OK
        assert [f['id'] for f in response.data] == [pending_request.id]
