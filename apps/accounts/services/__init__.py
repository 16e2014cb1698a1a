"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserNotFoundError,
    UserAlreadyExistsError,
    UsernameTakenError,
    EmailTakenError,
    ProfileOwnershipError,
)
from .user_management import (
    register_user,
    get_user,
    list_users,
    update_user,
    is_username_available,
    is_email_available,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserNotFoundError',
    'UserAlreadyExistsError',
    'UsernameTakenError',
    'EmailTakenError',
    'ProfileOwnershipError',
    # Services
    'register_user',
    'get_user',
    'list_users',
    'update_user',
    'is_username_available',
    'is_email_available',
]
