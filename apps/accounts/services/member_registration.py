"""Member registration service."""

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from .exceptions import MemberRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_member(
    *,
    username: str,
    email: str,
    password: str,
    telegram_id: str = None
) -> User:
    """
    Register a new member awaiting admin approval.

    Usernames and emails are unique case-insensitively.

    Args:
        username: Login name
        email: Member's email address
        password: Member's password (will be hashed)
        telegram_id: Optional Telegram account id

    Returns:
        Created User instance (status ``pending``)

    Raises:
        MemberRegistrationError: If username or email is already taken
    """
    if User.objects.filter(username__iexact=username).exists():
        raise MemberRegistrationError("Username already exists")
    if User.objects.filter(email__iexact=email).exists():
        raise MemberRegistrationError("Email is already in use")

    try:
        user = User.objects.create_user(
            username=username,
            email=email,
            password=password,
            telegram_id=telegram_id or None,
        )
    except IntegrityError as e:
        raise MemberRegistrationError(f"Registration failed: {e}")

    logger.info("Registered member %s (pending approval)", user.username)
    return user
