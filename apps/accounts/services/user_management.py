"""
User profile service.

Profiles are keyed by Firebase UID. Registration requires that the UID already
exists in Firebase Auth; the client signs up there first and then posts the
profile here.
"""

import logging
import re

from firebase_admin import auth as firebase_auth
from fuzzywuzzy import fuzz

from apps.core import firebase
from apps.core.models import to_camel
from apps.core.utils import now_iso

from ..models import User, USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH
from ..repository import UserRepository
from .exceptions import (
    UserNotFoundError,
    UserAlreadyExistsError,
    UsernameTakenError,
    EmailTakenError,
    ProfileOwnershipError,
)

logger = logging.getLogger(__name__)

# Minimum fuzzy score (0-100) for a profile to appear in search results
SEARCH_MATCH_THRESHOLD = 70

UPDATABLE_FIELDS = ('first_name', 'last_name', 'phone_number', 'photo_url')


def register_user(
    *,
    uid: str,
    email: str,
    username: str,
    first_name: str,
    last_name: str | None = None,
    phone_number: str | None = None,
    photo_url: str | None = None,
) -> User:
    """
    Create the profile for an existing Firebase Auth account.

    Raises:
        UserNotFoundError: If the UID is unknown to Firebase Auth
        UserAlreadyExistsError: If a profile already exists for the UID
        UsernameTakenError: If the username is in use
        EmailTakenError: If the email is in use
    """
    try:
        auth_record = firebase.get_auth_user(uid)
    except firebase_auth.UserNotFoundError:
        raise UserNotFoundError(f"User with UID {uid} not found in Firebase Auth")

    repository = UserRepository()

    if repository.exists(uid):
        raise UserAlreadyExistsError("User profile already exists")
    if repository.find_by_username(username) is not None:
        raise UsernameTakenError("Username is already taken")
    if repository.find_by_email(email) is not None:
        raise EmailTakenError("Email is already registered")

    now = now_iso()
    user = User(
        uid=uid,
        email=email,
        username=username,
        first_name=first_name,
        last_name=last_name,
        phone_number=phone_number,
        photo_url=photo_url,
        is_email_verified=bool(auth_record.email_verified),
        created_at=now,
        updated_at=now,
    )
    repository.set(uid, user)

    logger.info("Registered user profile %s (%s)", uid, username)
    return user


def get_user(*, uid: str) -> User:
    """
    Raises:
        UserNotFoundError: If no profile exists for the UID
    """
    user = UserRepository().get(uid)
    if user is None:
        raise UserNotFoundError(f"User with UID {uid} not found")
    return user


def _normalize(text: str) -> str:
    text = (text or '').lower().strip()
    return re.sub(r'\s+', ' ', text)


def _match_score(query: str, user: User) -> int:
    """Best fuzzy score of the query against username and full name."""
    return max(
        fuzz.partial_ratio(query, _normalize(user.username)),
        fuzz.token_set_ratio(query, _normalize(user.full_name)),
    )


def list_users(*, search: str | None = None) -> list[User]:
    """
    Return all profiles, or only those matching `search`, best match first.

    Matching is fuzzy over username and full name, so small typos still
    find the right person.
    """
    users = UserRepository().all()

    query = _normalize(search)
    if not query:
        return users

    scored = [(_match_score(query, user), user) for user in users]
    matches = [(score, user) for score, user in scored if score >= SEARCH_MATCH_THRESHOLD]
    matches.sort(key=lambda item: (-item[0], item[1].username))
    return [user for _, user in matches]


def update_user(*, uid: str, requesting_uid: str, **changes) -> User:
    """
    Update profile fields. Only fields passed in `changes` are written.

    Raises:
        ProfileOwnershipError: If the caller is not the profile owner
        UserNotFoundError: If the profile does not exist
    """
    if uid != requesting_uid:
        raise ProfileOwnershipError("You can only update your own profile")

    repository = UserRepository()
    user = repository.get(uid)
    if user is None:
        raise UserNotFoundError(f"User with UID {uid} not found")

    fields = {}
    for name in UPDATABLE_FIELDS:
        if name in changes:
            setattr(user, name, changes[name])
            fields[name] = changes[name]

    user.updated_at = now_iso()
    updates = {to_camel(name): value for name, value in fields.items()}
    updates['updatedAt'] = user.updated_at
    repository.update(uid, updates)

    logger.info("Updated profile %s (%s)", uid, ', '.join(fields) or 'no fields')
    return user


def is_username_available(*, username: str) -> bool:
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        return False
    return UserRepository().find_by_username(username) is None


def is_email_available(*, email: str) -> bool:
    return UserRepository().find_by_email(email) is None
