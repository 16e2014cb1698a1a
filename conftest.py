"""
Root pytest configuration.

Replaces Firestore with an in-memory client and Firebase token verification
with a fake that accepts tokens of the form `token-<uid>`. App-specific
fixtures live in each app's tests/conftest.py.
"""

from unittest import mock

import pytest
from firebase_admin import auth as firebase_auth
from rest_framework.test import APIClient

from apps.core.tests.fakes import FakeFirestoreClient


def fake_verify_id_token(token):
    if not token.startswith('token-'):
        raise firebase_auth.InvalidIdTokenError('Invalid token')
    uid = token[len('token-'):]
    return {'uid': uid, 'email': f'{uid}@example.com'}


@pytest.fixture(autouse=True)
def firestore():
    """Fresh in-memory Firestore for every test."""
    client = FakeFirestoreClient()
    with mock.patch('apps.core.firebase.get_firestore_client', return_value=client):
        yield client


@pytest.fixture(autouse=True)
def firebase_tokens():
    with mock.patch('apps.core.firebase.verify_id_token', side_effect=fake_verify_id_token) as patched:
        yield patched


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def client_for():
    """Return a factory building API clients authenticated as a given uid."""
    def _client_for(uid):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer token-{uid}')
        return client
    return _client_for


@pytest.fixture
def make_user(firestore):
    """Return a factory storing a user profile and returning it."""
    from apps.accounts.models import User
    from apps.accounts.repository import UserRepository

    def _make_user(uid, username=None, first_name='Test', last_name='User', **extra):
        user = User(
            uid=uid,
            email=extra.pop('email', f'{uid}@example.com'),
            username=username or uid[:12],
            first_name=first_name,
            last_name=last_name,
            created_at='2025-01-01T12:00:00+00:00',
            updated_at='2025-01-01T12:00:00+00:00',
            **extra,
        )
        UserRepository(client=firestore).set(uid, user)
        return user

    return _make_user
