"""User authentication service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, username: str, password: str) -> User:
    """
    Authenticate user with username and password.

    The username is matched case-insensitively after trimming whitespace,
    the same way it is stored by the user manager.

    Args:
        username: User's login name
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    username = User.objects.normalize_username(username)

    # Lock the row while last_login is written
    try:
        user = (
            User.objects
            .select_for_update()
            .get(username=username)
        )
    except User.DoesNotExist:
        logger.info("Login rejected for unknown user %r", username)
        raise InvalidCredentialsError("Invalid username or password.") from None

    if not user.check_password(password):
        logger.info("Login rejected for %r: wrong password", username)
        raise InvalidCredentialsError("Invalid username or password.")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated.")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
