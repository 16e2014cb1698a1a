"""
Firebase Admin SDK access.

The default app is initialised lazily from the service account file named by
FIREBASE_CREDENTIALS_PATH, so importing this module never touches the network.
Everything else in the project goes through the helpers below, which keeps a
single seam for tests to patch.
"""

import logging

import firebase_admin
from django.conf import settings
from firebase_admin import auth, credentials, firestore

logger = logging.getLogger(__name__)


def get_app():
    """Return the default Firebase app, initialising it on first use."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
        options = {}
        if settings.FIREBASE_PROJECT_ID:
            options['projectId'] = settings.FIREBASE_PROJECT_ID
        app = firebase_admin.initialize_app(cred, options or None)
        logger.info("Firebase app initialised (project=%s)", app.project_id)
        return app


def get_firestore_client():
    """Return the process-wide Firestore client."""
    return firestore.client(app=get_app())


def verify_id_token(token: str) -> dict:
    """Verify a Firebase ID token and return its decoded claims."""
    return auth.verify_id_token(
        token,
        app=get_app(),
        check_revoked=settings.FIREBASE_CHECK_REVOKED,
    )


def get_auth_user(uid: str):
    """
    Look up a user record in Firebase Authentication.

    Raises:
        firebase_admin.auth.UserNotFoundError: If no such UID exists
    """
    return auth.get_user(uid, app=get_app())
