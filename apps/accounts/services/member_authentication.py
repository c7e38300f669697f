"""Member authentication service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError, PendingApprovalError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_member(*, username: str, password: str) -> User:
    """
    Authenticate a member with username and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        username: Member's username (case-insensitive)
        password: Member's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
        PendingApprovalError: If an admin has not approved the member yet
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(username__iexact=username)
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError("Invalid username or password")

    if not user.check_password(password):
        logger.warning("Failed login for %s", username)
        raise InvalidCredentialsError("Invalid username or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    if not user.is_approved:
        raise PendingApprovalError("Your account is pending approval")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
