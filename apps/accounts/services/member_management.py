"""Member administration service."""

import logging
from typing import Optional
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import transaction

from apps.accounts.models import MemberStatus

from .exceptions import MemberNotFoundError, CannotDeleteSelfError, MemberRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


def _get_member_for_update(member_id: UUID) -> User:
    try:
        return User.objects.select_for_update().get(id=member_id)
    except User.DoesNotExist:
        raise MemberNotFoundError(f"Member with ID {member_id} not found")


@transaction.atomic
def approve_member(*, member_id: UUID) -> User:
    """Approve a pending member. Approving twice is a no-op."""
    member = _get_member_for_update(member_id)
    if member.status != MemberStatus.APPROVED:
        member.status = MemberStatus.APPROVED
        member.save(update_fields=['status'])
        logger.info("Approved member %s", member.username)
    return member


@transaction.atomic
def delete_member(*, member_id: UUID, deleted_by: User) -> None:
    """
    Delete a member account.

    Raises:
        MemberNotFoundError: If member doesn't exist
        CannotDeleteSelfError: If the admin targets their own account
    """
    member = _get_member_for_update(member_id)
    if member.id == deleted_by.id:
        raise CannotDeleteSelfError("You cannot delete your own account")

    username = member.username
    member.delete()
    logger.info("Member %s deleted by %s", username, deleted_by.username)


@transaction.atomic
def update_profile(
    *,
    user: User,
    username: Optional[str] = None,
    email: Optional[str] = None,
    telegram_id: Optional[str] = None
) -> User:
    """
    Update the caller's own profile. Role and status are not editable here.

    Raises:
        MemberRegistrationError: If the new username or email is taken
    """
    others = User.objects.exclude(id=user.id)
    update_fields = []

    if username is not None and username != user.username:
        if others.filter(username__iexact=username).exists():
            raise MemberRegistrationError("Username already exists")
        user.username = username
        update_fields.append('username')

    if email is not None and email != user.email:
        if others.filter(email__iexact=email).exists():
            raise MemberRegistrationError("Email is already in use")
        user.email = email
        update_fields.append('email')

    if telegram_id is not None:
        user.telegram_id = telegram_id or None
        update_fields.append('telegram_id')

    if update_fields:
        user.save(update_fields=update_fields)

    return user
