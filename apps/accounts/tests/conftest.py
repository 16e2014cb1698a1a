from unittest import mock

import pytest
from firebase_admin import auth as firebase_auth


@pytest.fixture
def auth_lookup():
    """Patch the Firebase Auth user lookup; every UID exists and is verified."""
    with mock.patch('apps.core.firebase.get_auth_user') as patched:
        patched.side_effect = lambda uid: mock.Mock(uid=uid, email_verified=True)
        yield patched


@pytest.fixture
def unknown_auth_user(auth_lookup):
    """Make the Firebase Auth lookup fail for every UID."""
    auth_lookup.side_effect = firebase_auth.UserNotFoundError('No user record found')
    return auth_lookup


@pytest.fixture
def registration_data():
    return {
        'uid': 'new-uid',
        'email': 'kari@example.com',
        'username': 'kari',
        'firstName': 'Kari',
        'lastName': 'Nordmann',
    }


@pytest.fixture
def alice(make_user):
    return make_user('alice-uid', username='alice', first_name='Alice', last_name='Berg')


@pytest.fixture
def bob(make_user):
    return make_user('bob-uid', username='bobby', first_name='Bob', last_name='Hansen')
