"""Bearer-token authentication backed by Firebase ID tokens."""

import logging
from dataclasses import dataclass

from firebase_admin import auth as firebase_auth
from firebase_admin import exceptions as firebase_exceptions
from rest_framework import authentication, exceptions

from apps.core import firebase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FirebaseUser:
    """Authenticated principal attached to request.user."""

    uid: str
    email: str | None = None

    is_authenticated = True
    is_anonymous = False

    def __str__(self):
        return self.uid


class FirebaseAuthentication(authentication.BaseAuthentication):
    """
    Authenticate `Authorization: Bearer <Firebase ID token>` headers.

    Requests without a bearer header are left anonymous so public endpoints
    keep working; a header carrying a bad token is always rejected.
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword.lower().encode():
            return None

        if len(header) != 2:
            raise exceptions.AuthenticationFailed('Invalid Authorization header')

        try:
            token = header[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed('Invalid Authorization header')

        try:
            claims = firebase.verify_id_token(token)
        except firebase_auth.RevokedIdTokenError:
            raise exceptions.AuthenticationFailed('Token has been revoked')
        except (ValueError, firebase_exceptions.FirebaseError) as e:
            logger.info("Rejected Firebase ID token: %s", e)
            raise exceptions.AuthenticationFailed('Invalid or expired token')

        user = FirebaseUser(uid=claims['uid'], email=claims.get('email'))
        return user, claims

    def authenticate_header(self, request):
        return self.keyword
