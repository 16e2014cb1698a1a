import pytest
from django.urls import reverse
from firebase_admin import auth as firebase_auth
from rest_framework import exceptions, status
from rest_framework.test import APIRequestFactory

from apps.core.authentication import FirebaseAuthentication, FirebaseUser


factory = APIRequestFactory()


class TestFirebaseAuthentication:

    def test_no_header_is_anonymous(self):
        request = factory.get('/api/events')
        assert FirebaseAuthentication().authenticate(request) is None

    def test_other_scheme_is_ignored(self):
        request = factory.get('/api/events', HTTP_AUTHORIZATION='Basic dXNlcjpwYXNz')
        assert FirebaseAuthentication().authenticate(request) is None

    def test_valid_token(self):
        request = factory.get('/api/events', HTTP_AUTHORIZATION='Bearer token-alice')
        user, claims = FirebaseAuthentication().authenticate(request)

        assert user == FirebaseUser(uid='alice', email='alice@example.com')
        assert user.is_authenticated
        assert claims['uid'] == 'alice'

    def test_invalid_token(self):
        request = factory.get('/api/events', HTTP_AUTHORIZATION='Bearer nonsense')
        with pytest.raises(exceptions.AuthenticationFailed):
            FirebaseAuthentication().authenticate(request)

    def test_revoked_token(self, firebase_tokens):
        firebase_tokens.side_effect = firebase_auth.RevokedIdTokenError('revoked')
        request = factory.get('/api/events', HTTP_AUTHORIZATION='Bearer token-alice')

        with pytest.raises(exceptions.AuthenticationFailed, match='revoked'):
            FirebaseAuthentication().authenticate(request)

    def test_header_with_spaces(self):
        request = factory.get('/api/events', HTTP_AUTHORIZATION='Bearer token alice')
        with pytest.raises(exceptions.AuthenticationFailed):
            FirebaseAuthentication().authenticate(request)


class TestProtectedEndpoints:

    def test_missing_token_gets_www_authenticate(self, api_client):
        response = api_client.get(reverse('events:event-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response['WWW-Authenticate'] == 'Bearer'

    def test_invalid_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer nonsense')
        response = api_client.get(reverse('events:event-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'UNAUTHORIZED'


class TestHealth:

    def test_health_is_public(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'status': 'UP'}

    def test_health_ignores_bad_tokens(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer nonsense')
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK

    def test_unknown_route_is_json(self, api_client):
        response = api_client.get('/no/such/route')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'error': 'NOT_FOUND', 'message': 'Resource not found'}
