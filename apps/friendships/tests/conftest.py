import pytest

from apps.friendships.services import send_friend_request


@pytest.fixture
def alice(make_user):
    return make_user('alice-uid', username='alice', first_name='Alice')


@pytest.fixture
def bob(make_user):
    return make_user('bob-uid', username='bobby', first_name='Bob')


@pytest.fixture
def carol(make_user):
    return make_user('carol-uid', username='carol', first_name='Carol')


@pytest.fixture
def alice_client(client_for, alice):
    return client_for(alice.uid)


@pytest.fixture
def bob_client(client_for, bob):
    return client_for(bob.uid)


@pytest.fixture
def carol_client(client_for, carol):
    return client_for(carol.uid)


@pytest.fixture
def pending_request(alice, bob):
    """Alice has asked Bob to be friends."""
    return send_friend_request(from_uid=alice.uid, to_uid=bob.uid)
